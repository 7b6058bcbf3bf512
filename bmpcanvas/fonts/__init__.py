"""
Font tooling.

Modules:
    font2bf2: BDF to BF2 font converter (requires bdflib)
"""
