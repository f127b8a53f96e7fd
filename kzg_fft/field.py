"""
BLS12-381 scalar field Fr using galois library.

This module provides a thin wrapper around galois for the prime field the
KZG commitment scheme works over, plus the integer conversions the transforms
and their golden vectors need.
"""

from typing import List

import galois

# BLS12-381 subgroup order r
BLS12_381_R = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001

# 7 generates the multiplicative group. Passing it in skips factoring r - 1.
PRIMITIVE_ROOT = 7

# Base field GF(r)
FF = galois.GF(BLS12_381_R, primitive_element=PRIMITIVE_ROOT, verify=False)

# r - 1 = 2^32 * odd
TWO_ADICITY = 32


# SCALE2_ROOT_OF_UNITY[i] is the primitive 2^i-th root of unity,
# pow(PRIMITIVE_ROOT, (BLS12_381_R - 1) >> i, BLS12_381_R)
SCALE2_ROOT_OF_UNITY: List[int] = [
    1,
    52435875175126190479447740508185965837690552500527637822603658699938581184512,
    3465144826073652318776269530687742778270252468765361963008,
    23674694431658770659612952115660802947967373701506253797663184111817857449850,
    14788168760825820622209131888203028446852016562542525606630160374691593895118,
    36581797046584068049060372878520385032448812009597153775348195406694427778894,
    31519469946562159605140591558550197856588417350474800936898404023113662197331,
    47309214877430199588914062438791732591241783999377560080318349803002842391998,
    36007022166693598376559747923784822035233416720563672082740011604939309541707,
    4214636447306890335450803789410475782380792963881561516561680164772024173390,
    22781213702924172180523978385542388841346373992886390990881355510284839737428,
    49307615728544765012166121802278658070711169839041683575071795236746050763237,
    39033254847818212395286706435128746857159659164139250548781411570340225835782,
    32731401973776920074999878620293785439674386180695720638377027142500196583783,
    39072540533732477250409069030641316533649120504872707460480262653418090977761,
    22872204467218851938836547481240843888453165451755431061227190987689039608686,
    15076889834420168339092859836519192632846122361203618639585008852351569017005,
    15495926509001846844474268026226183818445427694968626800913907911890390421264,
    20439484849038267462774237595151440867617792718791690563928621375157525968123,
    37115000097562964541269718788523040559386243094666416358585267518228781043101,
    1755840822790712607783180844474754741366353396308200820563736496551326485835,
    32468834368094611004052562760214251466632493208153926274007662173556188291130,
    4859563557044021881916617240989566298388494151979623102977292742331120628579,
    52167942466760591552294394977846462646742207006759917080697723404762651336366,
    18596002123094854211120822350746157678791770803088570110573239418060655130524,
    734830308204920577628633053915970695663549910788964686411700880930222744862,
    4541622677469846713471916119560591929733417256448031920623614406126544048514,
    15932505959375582308231798849995567447410469395474322018100309999481287547373,
    37480612446576615530266821837655054090426372233228960378061628060638903214217,
    5660829372603820951332104046316074966592589311213397907344198301300676239643,
    20094891866007995289136270587723853997043774683345353712639419774914899074390,
    34070893824967080313820779135880760772780807222436853681508667398599787661631,
]


def get_root_of_unity(scale: int) -> FF:
    """
    Get primitive 2^scale-th root of unity in Fr.

    Args:
        scale: The log2 of the desired root order (must be < 32)

    Returns:
        A primitive 2^scale-th root of unity
    """
    if scale < 0 or scale >= len(SCALE2_ROOT_OF_UNITY):
        raise ValueError(f"scale must be in [0, {len(SCALE2_ROOT_OF_UNITY) - 1}], got {scale}")
    return FF(SCALE2_ROOT_OF_UNITY[scale])


# --- Integer Conversion ---
# Limbs are little-endian 64-bit words of the canonical integer.


def fr_from_uint64(value: int) -> FF:
    """Embed a non-negative integer below 2^64 into Fr."""
    if value < 0 or value >> 64:
        raise ValueError(f"value must fit in 64 bits, got {value}")
    return FF(value)


def fr_from_uint64s(limbs: List[int]) -> FF:
    """Construct an Fr element from four little-endian 64-bit limbs."""
    if len(limbs) != 4:
        raise ValueError(f"Expected 4 limbs, got {len(limbs)}")
    value = 0
    for i, limb in enumerate(limbs):
        value |= (limb & 0xFFFFFFFFFFFFFFFF) << (64 * i)
    return FF(value)


def fr_to_uint64s(elem: FF) -> List[int]:
    """Extract four little-endian 64-bit limbs from an Fr element."""
    value = int(elem)
    return [(value >> (64 * i)) & 0xFFFFFFFFFFFFFFFF for i in range(4)]


def fr_equal(a: FF, b: FF) -> bool:
    return int(a) == int(b)


def fr_inv(a: FF) -> FF:
    """Multiplicative inverse. galois raises ZeroDivisionError for zero."""
    return a ** -1
