"""
High-level use cases for the sign.

Each service module orchestrates the shared storage to implement the caller
policies (fallback to defaults, validated playlist edits). Routers and scripts
call these services instead of reading or writing the JSON files directly.
"""
