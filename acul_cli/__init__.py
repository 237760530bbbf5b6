"""Auth0 ACUL CLI -- scaffolds Advanced Customizations for Universal Login projects."""

__version__ = "0.1.0"
