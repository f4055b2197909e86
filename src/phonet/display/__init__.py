from .outcome_renderer import DisplayLevel, max_word_len, render_outcome

__all__ = ["DisplayLevel", "max_word_len", "render_outcome"]
