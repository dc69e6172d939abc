"""slate - Markdown vault backend.

Scans a vault directory under the user's home for markdown notes and
exposes the result to a front end through named commands or the CLI.
"""

__version__ = "0.1.0"
