"""Command line interface for the Pangolin packer."""
