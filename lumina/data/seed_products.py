"""
Seed catalog
────────────
The eight demo products every fresh storefront starts with.
Edits made through the admin dashboard live only in memory.
"""
from lumina.models.product import Category, Product

SEED_PRODUCTS: list[dict] = [
    {
        "id": 1,
        "name": "베이직 오버핏 코튼 셔츠",
        "price": 45000,
        "category": Category.CLOTHING,
        "image": "https://picsum.photos/id/1059/400/600",
        "description": "편안한 착용감과 세련된 실루엣을 자랑하는 고밀도 코튼 셔츠입니다. 사계절 내내 활용 가능한 필수 아이템입니다.",
        "tags": ["셔츠", "오버핏", "데일리룩"],
    },
    {
        "id": 2,
        "name": "노이즈 캔슬링 헤드폰 Pro",
        "price": 289000,
        "category": Category.ELECTRONICS,
        "image": "https://picsum.photos/id/3/400/600",
        "description": "압도적인 몰입감을 선사하는 프리미엄 무선 헤드폰. 40시간 연속 재생과 급속 충전을 지원합니다.",
        "tags": ["음향기기", "헤드폰", "테크"],
    },
    {
        "id": 3,
        "name": "미니멀 가죽 크로스백",
        "price": 125000,
        "category": Category.ACCESSORIES,
        "image": "https://picsum.photos/id/1080/400/600",
        "description": "천연 소가죽으로 제작된 미니멀한 디자인의 크로스백. 어떤 스타일에도 자연스럽게 어울립니다.",
        "tags": ["가방", "가죽", "패션"],
    },
    {
        "id": 4,
        "name": "모던 세라믹 화병 세트",
        "price": 68000,
        "category": Category.HOME,
        "image": "https://picsum.photos/id/225/400/600",
        "description": "공간의 분위기를 바꿔주는 유니크한 쉐입의 세라믹 화병입니다. 꽃 없이 오브제로 두어도 아름답습니다.",
        "tags": ["인테리어", "소품", "화병"],
    },
    {
        "id": 5,
        "name": "빈티지 워싱 데님 자켓",
        "price": 89000,
        "category": Category.CLOTHING,
        "image": "https://picsum.photos/id/1069/400/600",
        "description": "자연스러운 워싱과 탄탄한 데님 소재가 돋보이는 자켓. 클래식한 디자인으로 유행을 타지 않습니다.",
        "tags": ["자켓", "데님", "아우터"],
    },
    {
        "id": 6,
        "name": "스마트 워치 시리즈 5",
        "price": 350000,
        "category": Category.ELECTRONICS,
        "image": "https://picsum.photos/id/119/400/600",
        "description": "건강 관리부터 알림 확인까지. 당신의 일상을 스마트하게 관리해주는 최고의 파트너.",
        "tags": ["시계", "스마트워치", "운동"],
    },
    {
        "id": 7,
        "name": "실버 체인 레이어드 목걸이",
        "price": 32000,
        "category": Category.ACCESSORIES,
        "image": "https://picsum.photos/id/1062/400/600",
        "description": "두 가지 굵기의 체인이 레이어드된 감각적인 디자인. 심플한 룩에 포인트가 되어줍니다.",
        "tags": ["주얼리", "목걸이", "실버"],
    },
    {
        "id": 8,
        "name": "소프트 터치 무드등",
        "price": 42000,
        "category": Category.HOME,
        "image": "https://picsum.photos/id/20/400/600",
        "description": "따뜻한 빛으로 아늑한 침실을 만들어주는 무드등. 터치로 밝기 조절이 가능합니다.",
        "tags": ["조명", "인테리어", "침실"],
    },
]


def seed_products() -> list[Product]:
    """Fresh Product instances — callers may mutate them freely."""
    return [Product(**p) for p in SEED_PRODUCTS]
