"""
This package contains all modules related to parsing raw values reported by
the appliance.

Sub-packages handle specific concerns:

- ``localization``: Device-supplied enum tables and localized values.
- ``values``: Typed parsers for strings, switches, contacts, times and quantities.
- ``extended``: Consumption values carried in the extended device state blob.
"""
