from .filter_controller import FilterController
from .lens_filter_controller import LensFilterController

__all__ = ["FilterController", "LensFilterController"]
