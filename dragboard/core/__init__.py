"""
FILE: dragboard/core/__init__.py
PURPOSE: Board model, reorder engine, store and dispatcher (no UI code)
"""
