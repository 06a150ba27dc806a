"""Chat transport and container engine implementations of the ports."""
