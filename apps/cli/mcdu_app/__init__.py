"""Command line front end for MCDU page rendering."""
