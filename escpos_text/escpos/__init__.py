"""ESC/POS protocol layer: command bytes, encoder, style transitions and renderer."""
