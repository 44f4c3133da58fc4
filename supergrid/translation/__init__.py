"""
Translation of solved model outputs into results records.
"""
from .base import OutputTranslator
from .model_translator import ModelOutputTranslator, read_results

__all__ = ['OutputTranslator', 'ModelOutputTranslator', 'read_results']
