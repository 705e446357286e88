# seedsync/tool_version.py
# Tool version constant. Single authoritative definition.
# Referenced by run_check.py for the CLI description.

TOOL_VERSION: str = "1.0.0"
