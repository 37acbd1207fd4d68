"""Example consumers and delegates built on the Auth coordinator."""
