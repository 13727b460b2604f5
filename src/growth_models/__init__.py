"""Value function iteration for the stochastic neoclassical growth model."""

__version__ = "0.1.0"
