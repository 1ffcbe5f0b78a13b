"""Fuzz testing infrastructure for ende.

This package contains:
- shadow_codec: Reference codec built on Python's strict str codecs
- test_codec_oracle: Differential tests and a RuleBasedStateMachine that
  grows a code point buffer across all three encodings

Tests here carry the ``fuzz`` marker and run only with ``pytest -m fuzz``.

Python 3.13+.
"""
