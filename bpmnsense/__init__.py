"""
BPMNSense - Language intelligence for the BPMNCode process notation.

Bridges the external ``bpmncode`` analyzer into an editor:
- Runs ``bpmncode check --format json`` against a file
- Translates the JSON report into LSP diagnostics
- Derives quick-fix edits from "did you mean" hints
- Static completion, hover and a heuristic definition search

The notation itself is never parsed here; the analyzer is the authority.
"""

__version__ = "0.1.0"
