"""branchdiff command line interface."""
