"""Application composition layer for the Tkinter GUI.

Presenters and controllers in this package wire views, view models, the user
store and use cases into runnable desktop workflows without placing business
logic in views.
"""
