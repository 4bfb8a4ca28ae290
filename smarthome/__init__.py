"""Console interpreter for a fixed set of simulated smart home devices"""

__version__ = '1.0.0'
