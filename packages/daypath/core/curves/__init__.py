"""Curve fitting, sampling and time mapping."""

from daypath.core.curves.fitting import FitStrategy, build_default_registry, fit, fit_curve
from daypath.core.curves.lut import LookupTable, build_lut, build_param_lut
from daypath.core.curves.mapping import DAY_SECONDS, global_t_at_time, point_at_time, time_at_point
from daypath.core.curves.models import CurveSpec
from daypath.core.curves.paths import segments_to_svg_path, smooth_quadratic_path
from daypath.core.curves.projection import Projection, project_point_to_cubic
from daypath.core.curves.sampling import CubicSamples, sample_cubic

__all__ = [
    "DAY_SECONDS",
    "CubicSamples",
    "CurveSpec",
    "FitStrategy",
    "LookupTable",
    "Projection",
    "build_default_registry",
    "build_lut",
    "build_param_lut",
    "fit",
    "fit_curve",
    "global_t_at_time",
    "point_at_time",
    "project_point_to_cubic",
    "sample_cubic",
    "segments_to_svg_path",
    "smooth_quadratic_path",
    "time_at_point",
]
