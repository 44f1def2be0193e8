"""abitrim - seleciona, enxuga e exporta ABIs de smart contracts."""

__version__ = "0.1.0"
