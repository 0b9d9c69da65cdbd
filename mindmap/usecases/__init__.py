"""Use-case layer for the authentication and mind-map workflows.

Each module holds one interactor with its input/output data and the output
boundary it reports to. Interactors talk to ports only and never touch
view models directly.
"""
