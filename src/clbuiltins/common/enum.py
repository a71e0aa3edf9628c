from enum import IntEnum


class IntEnum2(IntEnum):
    '''IntEnum that prints as its member name and parses back from it'''

    def __str__(self):
        return self.name

    def __repr__(self):
        return self.__str__()

    @classmethod
    def from_name(cls, name: str):
        '''Look up a member by name, case-insensitive'''
        member = cls.__members__.get(name.upper())
        if member is None:
            for key, value in cls.__members__.items():
                if key.lower() == name.lower():
                    return value

            raise ValueError(f'{name!r} is not a valid {cls.__name__}')

        return member
