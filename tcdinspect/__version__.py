"""Version information for tcdinspect."""

__version__ = "1.0.0"
__author__ = "tcdinspect contributors"
__author_email__ = "tcdinspect@users.noreply.github.com"
__license__ = "GPL-3.0"
__url__ = "https://github.com/tcdinspect/tcdinspect"
