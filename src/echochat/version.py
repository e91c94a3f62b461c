"""Package version.

Bump rules:
- Patch (0.1.x): wording fixes, logging tweaks
- Minor (0.x.0): new catalogs, new CLI options
- Major (x.0.0): changes to the loop contract (sentinel, slots, exit codes)
"""

VERSION = "0.1.0"
