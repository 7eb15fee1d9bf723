"""markd - bookmark directories for easy directory-hopping in the terminal.

The CLI is the main entry point, but the store is usable on its own:

    from markd import BookmarkStore, FileDataStore

    store = BookmarkStore.open(FileDataStore(path)).unwrap()

Logging is disabled when markd is imported as a library; call
`markd.enable_logging()` to see its records on stderr.
"""

from markd.bookmarks import Bookmark, BookmarkStore, PurgeReport
from markd.common import disable_library_logging, enable_library_logging
from markd.datastore import FileDataStore

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "Bookmark",
    "BookmarkStore",
    "FileDataStore",
    "PurgeReport",
    "enable_logging",
]
