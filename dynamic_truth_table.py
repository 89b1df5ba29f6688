"""
Variable-width truth tables for bit-parallel simulation.

A table over n variables holds 2^n bits in a Python int. Bit j is the
function value for the input assignment whose binary encoding is j,
variable 0 being the least significant bit.
"""


class DynamicTruthTable:
    """
    Boolean function over `num_vars` variables with value semantics.

    Example - AND of two variables:
        a = DynamicTruthTable.nth_var(2, 0)    # 1010
        b = DynamicTruthTable.nth_var(2, 1)    # 1100
        (a & b).to_binary()                    # "1000"
    """

    __slots__ = ('num_vars', 'bits')

    def __init__(self, num_vars: int, bits: int = 0):
        if num_vars < 0:
            raise ValueError(f"Number of variables must be non-negative, got {num_vars}")
        self.num_vars = num_vars
        self.bits = bits & self.mask

    # Construction

    @classmethod
    def constant(cls, num_vars: int, value: bool) -> "DynamicTruthTable":
        tt = cls(num_vars)
        return ~tt if value else tt

    @classmethod
    def nth_var(cls, num_vars: int, index: int) -> "DynamicTruthTable":
        """
        Projection function of variable `index`.

        The pattern is 2^index zeros followed by 2^index ones, repeated
        with period 2^(index + 1) across the table.
        """
        if not 0 <= index < num_vars:
            raise ValueError(f"Variable {index} out of range for {num_vars} variables")

        half = 1 << index
        bits = ((1 << half) - 1) << half
        length = half << 1
        total = 1 << num_vars
        while length < total:
            bits |= bits << length
            length <<= 1
        return cls(num_vars, bits)

    @classmethod
    def from_binary(cls, binary: str) -> "DynamicTruthTable":
        """Build a table from its binary string, most significant bit first."""
        num_bits = len(binary)
        if num_bits == 0 or num_bits & (num_bits - 1):
            raise ValueError(f"Binary string length must be a power of two, got {num_bits}")
        return cls(num_bits.bit_length() - 1, int(binary, 2))

    # Properties

    @property
    def num_bits(self) -> int:
        return 1 << self.num_vars

    @property
    def mask(self) -> int:
        return (1 << self.num_bits) - 1

    def is_const0(self) -> bool:
        return self.bits == 0

    def count_ones(self) -> int:
        return bin(self.bits).count('1')

    def get_bit(self, index: int) -> int:
        if not 0 <= index < self.num_bits:
            raise IndexError(f"Bit {index} out of range for {self.num_bits}-bit table")
        return (self.bits >> index) & 1

    def to_binary(self) -> str:
        return format(self.bits, f'0{self.num_bits}b')

    # Operators

    def _check_width(self, other: "DynamicTruthTable"):
        if self.num_vars != other.num_vars:
            raise ValueError(
                f"Truth tables have different widths: {self.num_vars} and {other.num_vars} variables"
            )

    def __invert__(self) -> "DynamicTruthTable":
        return DynamicTruthTable(self.num_vars, ~self.bits)

    def __and__(self, other: "DynamicTruthTable") -> "DynamicTruthTable":
        if not isinstance(other, DynamicTruthTable):
            return NotImplemented
        self._check_width(other)
        return DynamicTruthTable(self.num_vars, self.bits & other.bits)

    def __or__(self, other: "DynamicTruthTable") -> "DynamicTruthTable":
        if not isinstance(other, DynamicTruthTable):
            return NotImplemented
        self._check_width(other)
        return DynamicTruthTable(self.num_vars, self.bits | other.bits)

    def __xor__(self, other: "DynamicTruthTable") -> "DynamicTruthTable":
        if not isinstance(other, DynamicTruthTable):
            return NotImplemented
        self._check_width(other)
        return DynamicTruthTable(self.num_vars, self.bits ^ other.bits)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DynamicTruthTable):
            return NotImplemented
        return self.num_vars == other.num_vars and self.bits == other.bits

    def __hash__(self) -> int:
        return hash((self.num_vars, self.bits))

    def __repr__(self) -> str:
        if self.num_vars > 6:
            return f"DynamicTruthTable(num_vars={self.num_vars}, ones={self.count_ones()})"
        return f"DynamicTruthTable({self.to_binary()})"
