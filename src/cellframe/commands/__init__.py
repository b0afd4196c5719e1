"""Shell commands exposing cellframe functionalities.

This module contains the shell commands that can be used to interact with cellframe.

Peek
====

``cellframe-peek`` loads a delimited file and prints reports about its content::

    cellframe-peek data.csv --head 5 --shape --describe

Transformations can be applied before the reports are printed::

    cellframe-peek data.csv --dropna --sort-values n_employees --head 10

It can be tested against provided example data running it with the following command::

    cellframe-peek examples/data/shops.csv --dtypes --stats --value-counts

"""
