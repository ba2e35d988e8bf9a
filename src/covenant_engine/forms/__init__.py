"""Verified document generation gated on rule verdicts."""

from covenant_engine.forms.data import FormData, FormType
from covenant_engine.forms.synthesizer import SynthesizedForm, synthesize

__all__ = ["FormData", "FormType", "SynthesizedForm", "synthesize"]
