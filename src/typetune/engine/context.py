"""Classification of text into display, body and caption roles by size."""

from ..core.models import TextContext

DISPLAY_MIN_SIZE = 32

# Earlier releases used 11 here. 13 is what the calculator has shipped with;
# whether to move back is still an open product decision.
CAPTION_MAX_SIZE = 13


def detect_context(font_size: float) -> TextContext:
    if font_size >= DISPLAY_MIN_SIZE:
        return "display"
    if font_size <= CAPTION_MAX_SIZE:
        return "caption"
    return "body"
