"""
Simple factory for banks.
"""
from abc import ABC
from enum import Enum
from .registry import ConstructionRegistry


class BankType(Enum):
    CMBC = 'cmbc'
    ICBC = 'icbc'
    CB = 'cb'


class Bank(ABC):
    """Bank capability."""

    def display_name(self) -> str:
        return self.__class__.__name__


class CMBC(Bank):
    pass


class ICBC(Bank):
    pass


class CB(Bank):
    pass


BANKS: ConstructionRegistry[Bank] = ConstructionRegistry(
    BankType,
    {
        BankType.CMBC: CMBC,
        BankType.ICBC: ICBC,
        BankType.CB: CB,
    },
    name='banks',
    total=True
)


def select_bank(bank_type: BankType) -> Bank:
    """Create the bank for a bank type."""
    return BANKS.require(bank_type)
