"""Bump semantic versions across a project and its subprojects."""
