"""LearnSphere command-line tools."""
