"""
spellcore - dictionary lookup and edit-distance suggestions for ts-spellchecker.

Modules:
- services.dictionary: word-list loading and the immutable Dictionary
- services.edit_distance: bounded Damerau-Levenshtein distance
- services.candidates: ranked suggestions within a distance budget
- services.spellcheck_dictionary: token-by-token text checking
- services.spellcheck: process-wide service lifecycle
"""

__version__ = "0.1.0"
