"""
Tick multiplier table (generated)

ekubo-gen-tick-math 로 생성된 파일입니다. 직접 수정하지 마세요.

base = 1.000001
max ratio = 2^128
per-bit multiplier = sqrt(base)
number of iterations = 27
denominator = 1<<128
"""

OUTPUT_RADIX: int = 128
NUM_ITERATIONS: int = 27

# c_i = round(2^R / multiplier^(2^i))
TICK_MULTIPLIERS = (
    0xfffff79c8499329c7cbb2510d893283b,  # bit 0
    0xffffef390978c398134b4ff3764fe410,  # bit 1
    0xffffde72140b00a354bd3dc828e976c9,  # bit 2
    0xffffbce42c7be6c998ad6318193c0b18,  # bit 3
    0xffff79c86a8f6150a32d9778eceef97c,  # bit 4
    0xfffef3911b7cff24ba1b3dbb5f8f5974,  # bit 5
    0xfffde72350725cc4ea8feece3b5f13c8,  # bit 6
    0xfffbce4b06c196e9247ac87695d53c60,  # bit 7
    0xfff79ca7a4d1bf1ee8556cea23cdbaa5,  # bit 8
    0xffef3995a5b6a6267530f207142a5764,  # bit 9
    0xffde7444b28145508125d10077ba83b8,  # bit 10
    0xffbceceeb791747f10df216f2e53ec57,  # bit 11
    0xff79eb706b9a64c6431d76e63531e929,  # bit 12
    0xfef41d1a5f2ae3a20676bec6f7f9459a,  # bit 13
    0xfde95287d26d81bea159c37073122c73,  # bit 14
    0xfbd701c7cbc4c8a6bb81efd232d1e4e7,  # bit 15
    0xf7bf5211c72f5185f372aeb1d48f937e,  # bit 16
    0xefc2bf59df33ecc28125cf78ec4f167f,  # bit 17
    0xe08d35706200796273f0b3a981d90cfd,  # bit 18
    0xc4f76b68947482dc198a48a54348c4ed,  # bit 19
    0x978bcb9894317807e5fa4498eee7c0fa,  # bit 20
    0x59b63684b86e9f486ec54727371ba6ca,  # bit 21
    0x1f703399d88f6aa83a28b22d4a1f56e3,  # bit 22
    0x3dc5dac7376e20fc8679758d1bcdcfc,  # bit 23
    0xee7e32d61fdb0a5e622b820f681d0,  # bit 24
    0xde2ee4bc381afa7089aa84bb66,  # bit 25
    0xc0d55d4d7152c25fb139,  # bit 26
)
