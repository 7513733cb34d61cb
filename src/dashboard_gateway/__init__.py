"""Dashboard Gateway - cache-through aggregation gateway.

Sits between the dashboard client and the weather, quotes, source-host and
news providers: fans requests out, merges the results and memoizes them
briefly so repeated dashboard loads do not hit the upstreams again.
"""

from .__version__ import __version__

__all__ = ["__version__"]
