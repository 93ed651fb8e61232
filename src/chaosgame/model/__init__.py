"""
The MODEL layer contains pure data structures and game logic.
It has NO knowledge of the GUI (Qt) or the Visualization (pyqtgraph).
It deals with Geometry, History, the Phase machine and Point generation.
"""
