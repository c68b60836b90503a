"""Packaged alignment resources.

Layout below this package (or below ``SYNSET_ALIGN_DATA_DIR``):

    alignment/wn31-wn30.csv        version bridge, ``<pos><3.1 offset>,<pos><3.0 offset>``
    alignment/<lang>-ili.csv       inter-lingual index, ``<pos>#<index>,<pos><3.0 offset>``
    wordnet/<source>/data.<pos>    English WordNet data files
    <source>/<lang>/data.<pos>     other-language WordNet data files
"""
