"""
The APP layer: Qt application bootstrap, the signal-emitting store and the widgets.
"""
