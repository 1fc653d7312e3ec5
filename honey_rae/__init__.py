"""Honey Rae's Repairs: in-memory service API for customers, employees and service tickets."""
