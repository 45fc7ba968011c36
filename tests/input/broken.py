"""Assembly that fails while loading."""

raise RuntimeError("boom")
