"""payment-gateways: Abstract Factory over mock payment gateway families."""

__version__ = "0.1.0"
