# prismcat: concatenate files to stdout, painted in flag colors

__version__ = "2.0.0"
