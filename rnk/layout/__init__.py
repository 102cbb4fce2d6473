"""Grapheme-aware text measurement, wrapping, truncation and padding."""