"""Common literal values used across panelkit.

These constants keep the DOM conventions shared by the composer, the
assembler, templates and tests in one place so the client-side scripts and the
markup they target cannot drift apart.

Examples
--------
>>> from panelkit import _constants
>>> _constants.PJAX_CONTAINER_SELECTOR
'#pjax-container'
>>> _constants.DEFAULT_REFRESH_SECONDS * 1000
60000
"""

VERSION = "0.3.0"

PJAX_CONTAINER_ID = "pjax-container"
PJAX_CONTAINER_SELECTOR = f"#{PJAX_CONTAINER_ID}"
CONTENT_CONTAINER_CLASS = "pjax-container-content"
SIDEBAR_COLLAPSE_CLASS = "sidebar-collapse"

DEFAULT_REFRESH_SECONDS = 60

# Evaluated in the browser against the table's checkbox column.
SELECTED_ROWS_EXPRESSION = "selectedRows().join()"
