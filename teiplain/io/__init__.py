"""Input adapters for teiplain.

Contains the XML reader that turns TEI sources into markup trees.
"""

from .xml_reader import TeiXmlReader

__all__ = ["TeiXmlReader"]
