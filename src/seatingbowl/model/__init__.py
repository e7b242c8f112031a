"""
The MODEL layer contains pure data structures.
It has NO knowledge of any host CAD application or of rendering.
It deals with Geometry, Configuration and the computed Section.
"""
