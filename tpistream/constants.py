"""Leaf kinds that identify type and id records."""

# Leaves starting records that are referenced from symbol records.
LF_MODIFIER_16T = 0x0001
LF_POINTER_16T = 0x0002
LF_ARRAY_16T = 0x0003
LF_CLASS_16T = 0x0004
LF_STRUCTURE_16T = 0x0005
LF_UNION_16T = 0x0006
LF_ENUM_16T = 0x0007
LF_PROCEDURE_16T = 0x0008
LF_MFUNCTION_16T = 0x0009
LF_VTSHAPE = 0x000A
LF_COBOL0_16T = 0x000B
LF_COBOL1 = 0x000C
LF_BARRAY_16T = 0x000D
LF_LABEL = 0x000E
LF_NULL = 0x000F
LF_NOTTRAN = 0x0010
LF_DIMARRAY_16T = 0x0011
LF_VFTPATH_16T = 0x0012
LF_PRECOMP_16T = 0x0013
LF_ENDPRECOMP = 0x0014
LF_OEM_16T = 0x0015
LF_TYPESERVER_ST = 0x0016

# Leaves starting records referenced only from type records.
LF_SKIP_16T = 0x0200
LF_ARGLIST_16T = 0x0201
LF_DEFARG_16T = 0x0202
LF_LIST = 0x0203
LF_FIELDLIST_16T = 0x0204
LF_DERIVED_16T = 0x0205
LF_BITFIELD_16T = 0x0206
LF_METHODLIST_16T = 0x0207
LF_DIMCONU_16T = 0x0208
LF_DIMCONLU_16T = 0x0209
LF_DIMVARU_16T = 0x020A
LF_DIMVARLU_16T = 0x020B
LF_REFSYM = 0x020C

LF_BCLASS_16T = 0x0400
LF_VBCLASS_16T = 0x0401
LF_IVBCLASS_16T = 0x0402
LF_ENUMERATE_ST = 0x0403
LF_FRIENDFCN_16T = 0x0404
LF_INDEX_16T = 0x0405
LF_MEMBER_16T = 0x0406
LF_STMEMBER_16T = 0x0407
LF_METHOD_16T = 0x0408
LF_NESTTYPE_16T = 0x0409
LF_VFUNCTAB_16T = 0x040A
LF_FRIENDCLS_16T = 0x040B
LF_ONEMETHOD_16T = 0x040C
LF_VFUNCOFF_16T = 0x040D

# 32-bit type index versions of leaves all have the 0x1000 bit set.
LF_TI16_MAX = 0x1000

LF_MODIFIER = 0x1001
LF_POINTER = 0x1002
LF_ARRAY_ST = 0x1003
LF_CLASS_ST = 0x1004
LF_STRUCTURE_ST = 0x1005
LF_UNION_ST = 0x1006
LF_ENUM_ST = 0x1007
LF_PROCEDURE = 0x1008
LF_MFUNCTION = 0x1009
LF_COBOL0 = 0x100A
LF_BARRAY = 0x100B
LF_DIMARRAY_ST = 0x100C
LF_VFTPATH = 0x100D
LF_PRECOMP_ST = 0x100E
LF_OEM = 0x100F
LF_ALIAS_ST = 0x1010
LF_OEM2 = 0x1011

LF_SKIP = 0x1200
LF_ARGLIST = 0x1201
LF_DEFARG_ST = 0x1202
LF_FIELDLIST = 0x1203
LF_DERIVED = 0x1204
LF_BITFIELD = 0x1205
LF_METHODLIST = 0x1206
LF_DIMCONU = 0x1207
LF_DIMCONLU = 0x1208
LF_DIMVARU = 0x1209
LF_DIMVARLU = 0x120A

LF_BCLASS = 0x1400
LF_VBCLASS = 0x1401
LF_IVBCLASS = 0x1402
LF_FRIENDFCN_ST = 0x1403
LF_INDEX = 0x1404
LF_MEMBER_ST = 0x1405
LF_STMEMBER_ST = 0x1406
LF_METHOD_ST = 0x1407
LF_NESTTYPE_ST = 0x1408
LF_VFUNCTAB = 0x1409
LF_FRIENDCLS = 0x140A
LF_ONEMETHOD_ST = 0x140B
LF_VFUNCOFF = 0x140C
LF_NESTTYPEEX_ST = 0x140D
LF_MEMBERMODIFY_ST = 0x140E
LF_MANAGED_ST = 0x140F

# Leaves above this value carry NUL-terminated names.
LF_ST_MAX = 0x1500

LF_TYPESERVER = 0x1501
LF_ENUMERATE = 0x1502
LF_ARRAY = 0x1503
LF_CLASS = 0x1504
LF_STRUCTURE = 0x1505
LF_UNION = 0x1506
LF_ENUM = 0x1507
LF_DIMARRAY = 0x1508
LF_PRECOMP = 0x1509
LF_ALIAS = 0x150A
LF_DEFARG = 0x150B
LF_FRIENDFCN = 0x150C
LF_MEMBER = 0x150D
LF_STMEMBER = 0x150E
LF_METHOD = 0x150F
LF_NESTTYPE = 0x1510
LF_ONEMETHOD = 0x1511
LF_NESTTYPEEX = 0x1512
LF_MEMBERMODIFY = 0x1513
LF_MANAGED = 0x1514
LF_TYPESERVER2 = 0x1515

LF_STRIDED_ARRAY = 0x1516
LF_HLSL = 0x1517
LF_MODIFIER_EX = 0x1518
LF_INTERFACE = 0x1519
LF_BINTERFACE = 0x151A
LF_VECTOR = 0x151B
LF_MATRIX = 0x151C

LF_VFTABLE = 0x151D
LF_ENDOFLEAFRECORD = LF_VFTABLE

LF_TYPE_LAST = LF_ENDOFLEAFRECORD + 1
LF_TYPE_MAX = LF_TYPE_LAST - 1

LF_FUNC_ID = 0x1601
LF_MFUNC_ID = 0x1602
LF_BUILDINFO = 0x1603
LF_SUBSTR_LIST = 0x1604
LF_STRING_ID = 0x1605
LF_UDT_SRC_LINE = 0x1606
LF_UDT_MOD_SRC_LINE = 0x1607

LF_CLASS2 = 0x1608
LF_STRUCTURE2 = 0x1609
LF_UNION2 = 0x160A
LF_INTERFACE2 = 0x160B

LF_ID_LAST = LF_UDT_MOD_SRC_LINE + 1
LF_ID_MAX = LF_ID_LAST - 1

# Numeric leaves.
LF_NUMERIC = 0x8000
LF_CHAR = 0x8000
LF_SHORT = 0x8001
LF_USHORT = 0x8002
LF_LONG = 0x8003
LF_ULONG = 0x8004
LF_REAL32 = 0x8005
LF_REAL64 = 0x8006
LF_REAL80 = 0x8007
LF_REAL128 = 0x8008
LF_QUADWORD = 0x8009
LF_UQUADWORD = 0x800A
LF_REAL48 = 0x800B
LF_COMPLEX32 = 0x800C
LF_COMPLEX64 = 0x800D
LF_COMPLEX80 = 0x800E
LF_COMPLEX128 = 0x800F
LF_VARSTRING = 0x8010

LF_OCTWORD = 0x8017
LF_UOCTWORD = 0x8018

LF_DECIMAL = 0x8019
LF_DATE = 0x801A
LF_UTF8STRING = 0x801B

LF_REAL16 = 0x801C

# Padding bytes between fields.
LF_PAD0 = 0xF0
LF_PAD1 = 0xF1
LF_PAD2 = 0xF2
LF_PAD3 = 0xF3
LF_PAD4 = 0xF4
LF_PAD5 = 0xF5
LF_PAD6 = 0xF6
LF_PAD7 = 0xF7
LF_PAD8 = 0xF8
LF_PAD9 = 0xF9
LF_PAD10 = 0xFA
LF_PAD11 = 0xFB
LF_PAD12 = 0xFC
LF_PAD13 = 0xFD
LF_PAD14 = 0xFE
LF_PAD15 = 0xFF