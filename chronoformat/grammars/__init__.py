"""ABNF grammars for the strict parsing mode of the RFC formats."""
