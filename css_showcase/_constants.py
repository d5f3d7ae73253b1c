"""Common literal values used across css_showcase.

These constants keep marker names, attribute lists, and identifier prefixes
centralized so the parser, mutator, builder, and tests import the same values
without drifting. Intended for internal use within the css_showcase package.

Examples
--------
>>> from css_showcase import _constants
>>> _constants.ANCHOR_TEMPLATE.format(key="buttons")
'section_buttons'
>>> "for" in _constants.UNIQUE_ATTRS
True
"""

WRAPPER_TAG = "styledoc-wrapper"
UNIQUE_ATTRS = ("id", "for")
ANCHOR_TEMPLATE = "section_{key}"
DEFAULT_STATES_HTML_GLUE = "\n"
DEFAULT_MAX_CONCURRENT_LOADS = 8
DEFAULT_HTTP_TIMEOUT = 30.0
