"""
SubCrawler - Subdomain Reconnaissance Tool

A command-line subdomain brute-forcer that expands a wordlist into candidate
hostnames and checks each one for DNS resolvability using a pool of
concurrent workers.
"""

__version__ = "1.0.0"
__author__ = "SubCrawler Development Team"
