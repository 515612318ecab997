"""
wf_directory – faceted directory query engine.

Import path convention::

    from wf_directory.application.listing import ListingEngine
    from wf_directory.listings import workflow_directory
    from wf_directory.adapters.postgrest import PostgrestQueryService
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
