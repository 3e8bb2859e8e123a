"""Format-independent building blocks: models, citations and diagnostics."""
