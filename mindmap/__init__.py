"""MindMap desktop application: authentication and mind-map use cases."""
