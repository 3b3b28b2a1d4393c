"""Delete kubeconfig contexts and prune the clusters/users they leave behind."""

__version__ = "1.0.0"
