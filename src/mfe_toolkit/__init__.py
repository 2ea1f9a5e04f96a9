"""Microfrontend toolkit.

Two command-line tools for a React microfrontend monorepo:

- ``create-microfrontend`` instantiates ``src/microfrontends/_template`` for
  a new microfrontend (see :mod:`mfe_toolkit.scaffolder`).
- ``prepare-integration`` repackages an existing microfrontend for the host
  project (see :mod:`mfe_toolkit.integrator`).
"""

__version__ = "0.1.0"
