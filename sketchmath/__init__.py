"""Numeric, randomness and grid helpers for creative-coding sketches."""

from .errors import SketchMathError, InvalidRangeError, EmptyInputError
from .types import Point, RGB
from .rng import set_seed, get_seed, get_rng
from .randomness import (
    random,
    random_unit,
    random_upto,
    random_range,
    random_int,
    random_interval,
    random_normal,
    random_from_array,
    shuffle_array,
    shuffle_string,
)
from .math_utils import (
    clamp,
    constrain,
    lerp,
    lerp_unclamped,
    inverse_lerp,
    map_range,
    wrap,
    dist_sq,
    dist,
    manhattan_dist,
)
from .grid import xy_from_index, index_from_xy
from .formatting import dec_to_hex, hex_to_dec, css_to_rgb, rgb_to_hex
from .easing import (
    poly_ease_in,
    poly_ease_out,
    poly_ease_inout,
    ease_out_quad,
    ease_in_out_cubic,
)
from .host import (
    HostEnvironment,
    StaticHost,
    EnvironHost,
    get_host,
    set_host,
    is_mobile,
    get_css_var,
    get_css_color,
)

__version__ = "0.1.0"

__all__ = [
    'SketchMathError',
    'InvalidRangeError',
    'EmptyInputError',
    'Point',
    'RGB',
    'set_seed',
    'get_seed',
    'get_rng',
    'random',
    'random_unit',
    'random_upto',
    'random_range',
    'random_int',
    'random_interval',
    'random_normal',
    'random_from_array',
    'shuffle_array',
    'shuffle_string',
    'clamp',
    'constrain',
    'lerp',
    'lerp_unclamped',
    'inverse_lerp',
    'map_range',
    'wrap',
    'dist_sq',
    'dist',
    'manhattan_dist',
    'xy_from_index',
    'index_from_xy',
    'dec_to_hex',
    'hex_to_dec',
    'css_to_rgb',
    'rgb_to_hex',
    'poly_ease_in',
    'poly_ease_out',
    'poly_ease_inout',
    'ease_out_quad',
    'ease_in_out_cubic',
    'HostEnvironment',
    'StaticHost',
    'EnvironHost',
    'get_host',
    'set_host',
    'is_mobile',
    'get_css_var',
    'get_css_color',
]
