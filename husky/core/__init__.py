"""Core evaluation modules for husky.

This package contains the calculator engine:
- expression: arithmetic parser/evaluator (precedence climbing)
- conversions: the static table of unit conversions
- resolver: unit-pair lookup with ambiguity detection
- dispatch: per-line routing between conversion and arithmetic
- errors: exception taxonomy shared by the modules above
- config: session settings for the command-line front end
"""
