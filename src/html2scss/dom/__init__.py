"""DOM access layer -- element protocol and BeautifulSoup adapter."""

from html2scss.dom.model import Element, Node
from html2scss.dom.soup import SoupElement, find_root, parse_html

__all__ = ["Element", "Node", "SoupElement", "find_root", "parse_html"]
