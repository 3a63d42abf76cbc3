#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
mstranslator Module

Client for the Microsoft Translator HTTP API: translation, language
detection and the catalog of supported languages.
"""

# Expose the translator factory as the primary API
from .translator import MicrosoftTranslator, TranslationService, get_translator
from .base import Language, TranslatorError

__version__ = "0.1.0"
