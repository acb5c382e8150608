from .base import ApiAdapter, error_details
from .current_rms import CurrentRmsApi

__all__ = ["ApiAdapter", "CurrentRmsApi", "error_details"]
