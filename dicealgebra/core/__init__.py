"""Shared configuration, logging and result types."""
