from .parser import dependencies, strip_xml_declaration

__all__ = ["dependencies", "strip_xml_declaration"]
