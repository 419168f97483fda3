"""Reading raw ADC captures."""

from .adc import read_adc_file, load_adc_tensor, load_adc_file

__all__ = ["read_adc_file", "load_adc_tensor", "load_adc_file"]
