"""Helpers shared by the decoder and the command line front-end."""
