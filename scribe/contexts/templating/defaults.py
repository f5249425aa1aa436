"""
Default values for Scribe rendering.

Provides shared defaults used by:
- builders.py (colors when the front-matter supplies none)
- html_generator.py (layout fallback)
- level_parser.py (level for items without a recognizable proficiency)
"""

from dataclasses import dataclass

# Default color scheme (blue accent on near-black)
DEFAULT_ACCENT = "#2e6cb2"
DEFAULT_DARK = "#1e2936"

# Navy used by the "klassiek" layout for header band, headings and bars
KLASSIEK_NAVY = "#1d3461"

DEFAULT_TEMPLATE = "donker"

# Level assumed when an item carries no recognizable proficiency ("competent")
DEFAULT_LEVEL = 70

MIN_LEVEL = 0
MAX_LEVEL = 100


@dataclass(frozen=True)
class RenderDefaults:
    """
    Fallback values applied when a document's front-matter is silent.

    Passed explicitly into the builders and renderer; the templating context
    never reads configuration files or the environment itself.

    Attributes:
        accent: Accent color
        dark: Dark/base color
        template: Layout name
    """

    accent: str = DEFAULT_ACCENT
    dark: str = DEFAULT_DARK
    template: str = DEFAULT_TEMPLATE
