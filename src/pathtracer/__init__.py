"""Monte-Carlo path tracer for static scenes of planes and spheres."""

__version__ = "0.1.0"
