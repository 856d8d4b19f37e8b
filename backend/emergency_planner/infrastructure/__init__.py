"""Infrastructure Layer — MCP transport and cross-cutting concerns (logging).

Invariants:
    - Infrastructure wires core/ and services/ together; core/ never imports it

Design Decisions:
    - Transport kept thin: conversion between MCP types and the tool envelope only
"""
