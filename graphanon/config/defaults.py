"""Anchor configuration: the default anonymization parameters."""

from graphanon.config.experiment import AnonymizationConfig

# Instantiated with all-default values: n=200, num_labels=4, p=0.03,
# alpha=0.3, strategy="greedy", seed=42.
ANCHOR_CONFIG = AnonymizationConfig()
