"""Cancellation implementation parts; import from ``scrolly_llm.base.cancellation``."""
