"""
rmit

AI-powered commit message generation from the current git diff.
"""

__version__ = "1.0.0"

# Conventional commit prefixes the model is asked to use
COMMIT_TYPE_NAMES = ('feat', 'fix', 'docs', 'style', 'refactor', 'test', 'chore')
