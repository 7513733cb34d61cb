"""Platform services shared by all gateway features."""
