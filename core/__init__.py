"""
Format-independent building blocks for converting Claude plugins.

The pieces here know nothing about a particular target tool:
- plugin_models: in-memory representation of a Claude plugin (input)
- bundle_models: target bundle ready to be written to disk (output)
- options: shared conversion options record
- naming: name normalization and path rewriting
- frontmatter: YAML frontmatter formatting and parsing
- files: async filesystem helpers
- target_interface / registry: target dialect contract and lookup
"""
