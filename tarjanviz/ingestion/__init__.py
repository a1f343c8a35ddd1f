"""
Graph Ingestion

Sources of Graph values: explicit edge lists go straight through
Graph.construct(); random graphs come from the generator.
"""

from .generator import GenerationConfig, GeneratedGraph, generate_graph

__all__ = ['GenerationConfig', 'GeneratedGraph', 'generate_graph']
