"""Small number toys: e, pi, Fibonacci, primes, Ackermann, mediants, a turtle plotter, an LCG seed search and clock printers."""

__version__ = "0.1.0"