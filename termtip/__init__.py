"""
TermTip
Glossary tooltip annotation for domain vocabulary in free text
"""

__version__ = "1.0.0"
