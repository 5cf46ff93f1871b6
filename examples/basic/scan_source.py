"""Scan a Puma snippet and print its tokens — zero config, zero deps."""

from puma import scan

for token in scan('value greeting = "hello"\nreturn greeting\n'):
    print(token)
