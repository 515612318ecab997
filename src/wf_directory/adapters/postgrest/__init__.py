"""PostgREST adapter – Query Service over a PostgREST / Supabase REST endpoint."""
from wf_directory.adapters.postgrest.filters import encode_query, parse_content_range
from wf_directory.adapters.postgrest.query_service import PostgrestQueryService

__all__ = ["PostgrestQueryService", "encode_query", "parse_content_range"]
