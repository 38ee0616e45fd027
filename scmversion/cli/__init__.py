"""Command line interface of scmversion."""
