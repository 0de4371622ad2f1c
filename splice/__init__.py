"""Core of a small 2D game framework: vectors, matrices, colours, vertex data, input, camera, entities, texts and a GUI toolkit."""

__version__ = "0.1.0"