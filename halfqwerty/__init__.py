"""Half-QWERTY English input engine."""

from halfqwerty.__version__ import __version__
from halfqwerty.core.context import InputContext
from halfqwerty.core.layouts import LayoutVariant, mirror_text, resolve_mirror
from halfqwerty.core.typing_stats import TypingStats
