"""
Evaluation Package
==================

Contains the token bank and the harness for playing and summarizing games.
"""

from boxgame.evaluation.run_eval import evaluate_bank, load_token_bank

__all__ = ["evaluate_bank", "load_token_bank"]
