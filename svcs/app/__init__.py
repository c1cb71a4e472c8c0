"""Command line front end for SVCS."""
