"""Application-level constants."""

# Tag frequency table columns
TAG_COL = "tag"
COUNT_COL = "count"

# Console summary limits
SUMMARY_MAX_HIGH_CONFIDENCE = 5
SUMMARY_MAX_LOW_CONFIDENCE = 3
SUMMARY_MAX_KEYWORDS = 5
SUMMARY_TOOLS_PREVIEW = 3

# Theme pages
THEME_PAGE_SUFFIX = ".md"
THEME_PAGE_FOOTER = "*This theme page is automatically generated. [Edit theme metadata]({registry_link})*"
EMPTY_THEME_NOTICE = "*No tools have been added to this theme yet.*"

# Log files
LOG_DIR_NAME = "logs"
LOG_FILENAME = "catalog.log"
