"""Render a README open pull request badge and contribution gallery from GitHub history."""
