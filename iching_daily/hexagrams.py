"""
hexagrams.py — Static text table for the 64 hexagrams in King Wen order.

Each entry carries its line pattern (bottom to top, 1 = yang) and five
commentary styles:

    image_zh      大象傳 (Great Image)
    judgement_zh  彖傳 (Tuan commentary)
    image         English rendering of the Great Image
    judgement     English rendering of the Tuan commentary
    wilhelm       Paraphrase in the spirit of Wilhelm (not direct quotes)
"""

from __future__ import annotations
from typing import Any, Dict, Tuple

# Commentary keys, in the order the reveal table bands them
STYLE_KEYS = ("image_zh", "judgement_zh", "image", "judgement", "wilhelm")

HEXAGRAMS: Tuple[Dict[str, Any], ...] = (
    {
        "number": 1,
        "symbol": "䷀",
        "name": "乾",
        "pinyin": "Qián",
        "lines": (1, 1, 1, 1, 1, 1),
        "image_zh": "天行健，君子以自強不息",
        "judgement_zh": "大哉乾元，萬物資始，乃統天。雲行雨施，品物流形。",
        "image": "Heaven moves with vigor; the noble one strives ceaselessly",
        "judgement": "Vast is the primal creative — all things owe their beginning to it. Clouds drift and rain falls; the myriad forms take shape.",
        "wilhelm": "The movement of heaven is full of power. Know when to persist and when to rest — what is full cannot last.",
    },
    {
        "number": 2,
        "symbol": "䷁",
        "name": "坤",
        "pinyin": "Kūn",
        "lines": (0, 0, 0, 0, 0, 0),
        "image_zh": "地勢坤，君子以厚德載物",
        "judgement_zh": "至哉坤元，萬物資生，乃順承天。坤厚載物，德合無疆。",
        "image": "Earth's nature is receptive; the noble one carries all with deep virtue",
        "judgement": "Supreme is the primal receptive — all things owe their birth to it. Earth bears all with thickness; its virtue knows no bounds.",
        "wilhelm": "In the nature of earth lies the light. Small negative patterns accumulate into major obstacles — let hidden qualities shine forth at the right time.",
    },
    {
        "number": 3,
        "symbol": "䷂",
        "name": "屯",
        "pinyin": "Zhūn",
        "lines": (1, 0, 0, 0, 1, 0),
        "image_zh": "雲雷屯，君子以經綸",
        "judgement_zh": "屯，剛柔始交而難生，動乎險中，大亨貞。",
        "image": "Clouds and thunder gather; the noble one brings order from chaos",
        "judgement": "Difficulty: firm and yielding first meet and hardship arises. Movement amid danger — great success through perseverance.",
        "wilhelm": "The superior man brings order out of confusion. Avoid premature action — to go only when bidden is clarity.",
    },
    {
        "number": 4,
        "symbol": "䷃",
        "name": "蒙",
        "pinyin": "Méng",
        "lines": (0, 1, 0, 0, 0, 1),
        "image_zh": "山下出泉，蒙；君子以果行育德",
        "judgement_zh": "蒙，山下有險，險而止，蒙。蒙亨，以亨行時中也。",
        "image": "A spring emerges below the mountain; the noble one cultivates virtue through decisive action",
        "judgement": "Youthful folly: danger beneath the mountain, halting before peril. Success comes through acting at the right moment.",
        "wilhelm": "Discipline and structure are necessary, but must be balanced against rigidity. Genuine learning occurs when receptivity meets principled instruction.",
    },
    {
        "number": 5,
        "symbol": "䷄",
        "name": "需",
        "pinyin": "Xū",
        "lines": (1, 1, 1, 0, 1, 0),
        "image_zh": "雲上於天，需；君子以飲食宴樂",
        "judgement_zh": "需，須也，險在前也。剛健而不陷，其義不困窮矣。",
        "image": "Clouds rise to heaven; the noble one eats, drinks, and enjoys in good time",
        "judgement": "Waiting: necessity, for danger lies ahead. The strong and healthy do not sink — their purpose cannot be exhausted.",
        "wilhelm": "True strength lies in calm forbearance. Do not seek out difficulties overhastily — maintain equilibrium while external conditions develop.",
    },
    {
        "number": 6,
        "symbol": "䷅",
        "name": "訟",
        "pinyin": "Sòng",
        "lines": (0, 1, 0, 1, 1, 1),
        "image_zh": "天與水違行，訟；君子以作事謀始",
        "judgement_zh": "訟，上剛下險，險而健，訟。訟有孚窒惕，中吉，剛來而得中也。",
        "image": "Heaven and water move apart; the noble one plans carefully before acting",
        "judgement": "Conflict: strength above, danger below — danger meeting vigor breeds contention. Sincerity blocked brings caution; finding center brings fortune.",
        "wilhelm": "Conflict arises from opposing forces. Carefully consider the beginning — victory through conflict commands no respect.",
    },
    {
        "number": 7,
        "symbol": "䷆",
        "name": "師",
        "pinyin": "Shī",
        "lines": (0, 1, 0, 0, 0, 0),
        "image_zh": "地中有水，師；君子以容民畜眾",
        "judgement_zh": "師，眾也。貞，正也。能以眾正，可以王矣。",
        "image": "Water within the earth; the noble one nurtures the people and gathers the multitude",
        "judgement": "The army is the multitude; perseverance is righteousness. Who can lead the masses toward what is right may become sovereign.",
        "wilhelm": "Losing order is unfortunate. Legitimate authority derives from moral integrity, not mere position — develop internal cohesion.",
    },
    {
        "number": 8,
        "symbol": "䷇",
        "name": "比",
        "pinyin": "Bǐ",
        "lines": (0, 0, 0, 0, 1, 0),
        "image_zh": "地上有水，比；先王以建萬國，親諸侯",
        "judgement_zh": "比，吉也，比，輔也，下順從也。原筮元永貞，無咎，以剛中也。",
        "image": "Water upon the earth; the ancient kings established nations and befriended lords",
        "judgement": "Holding together is auspicious — it means support, the lower follows willingly. Consult the oracle once more: eternal constancy brings no blame.",
        "wilhelm": "Do not lose yourself when seeking union. Maintain your convictions — without proper foundation, no successful unity is achievable.",
    },
    {
        "number": 9,
        "symbol": "䷈",
        "name": "小畜",
        "pinyin": "Xiǎo Xù",
        "lines": (1, 1, 1, 0, 1, 1),
        "image_zh": "風行天上，小畜；君子以懿文德",
        "judgement_zh": "小畜，柔得位而上下應之，曰小畜。健而巽，剛中而志行，乃亨。",
        "image": "Wind moves across heaven; the noble one refines cultural virtue",
        "judgement": "Small taming: the yielding gains position as above and below respond. Strong yet gentle, firm in center with will advancing — success.",
        "wilhelm": "What seems small and insignificant tames chaos through steady refinement. Dense clouds gather, but the time for rain has not yet come.",
    },
    {
        "number": 10,
        "symbol": "䷉",
        "name": "履",
        "pinyin": "Lǚ",
        "lines": (1, 1, 0, 1, 1, 1),
        "image_zh": "上天下澤，履；君子以辨上下，定民志",
        "judgement_zh": "履，柔履剛也。說而應乎乾，是以履虎尾，不咥人，亨。",
        "image": "Heaven above, lake below; the noble one distinguishes high and low, settling people's purpose",
        "judgement": "Treading: the soft steps on the firm. Joyous yet responsive to heaven — thus one treads on the tiger's tail and is not bitten.",
        "wilhelm": "The superior man discriminates between high and low, and thereby fortifies the minds of the people. Tread carefully; even the tiger does not bite one who knows his place.",
    },
    {
        "number": 11,
        "symbol": "䷊",
        "name": "泰",
        "pinyin": "Tài",
        "lines": (1, 1, 1, 0, 0, 0),
        "image_zh": "天地交泰，后以財成天地之道，輔相天地之宜，以左右民",
        "judgement_zh": "泰，小往大來，吉亨。則是天地交而萬物通也。",
        "image": "Heaven and earth unite in peace; the ruler completes the way of heaven and earth",
        "judgement": "Peace: the small departs, the great arrives; heaven and earth commune and all things flourish",
        "wilhelm": "Complementary forces naturally align. Act with restraint and attention to natural patterns rather than ego-driven ambition.",
    },
    {
        "number": 12,
        "symbol": "䷋",
        "name": "否",
        "pinyin": "Pǐ",
        "lines": (0, 0, 0, 1, 1, 1),
        "image_zh": "天地不交，否；君子以儉德辟難",
        "judgement_zh": "否之匪人，不利君子貞。大往小來，則是天地不交而萬物不通也。",
        "image": "Heaven and earth do not unite; the noble one withdraws into frugal virtue to avoid danger",
        "judgement": "Standstill does not favor the noble; the great departs, the small arrives; heaven and earth do not commune",
        "wilhelm": "Heaven and earth do not commune; the inferior advances. The superior man falls back upon his inner worth and does not let himself be honored with revenue.",
    },
    {
        "number": 13,
        "symbol": "䷌",
        "name": "同人",
        "pinyin": "Tóng Rén",
        "lines": (1, 0, 1, 1, 1, 1),
        "image_zh": "天與火，同人；君子以類族辨物",
        "judgement_zh": "同人，柔得位得中而應乎乾，曰同人。同人于野，亨，利涉大川。",
        "image": "Heaven with fire; the noble one organizes clans and distinguishes things",
        "judgement": "Fellowship: the yielding gains its rightful place, centered and responding to heaven. Fellowship in the open succeeds; it furthers crossing the great water.",
        "wilhelm": "Fellowship requires going beyond self-interest. Authentic community is built on openness — recognize when to yield rather than dominate.",
    },
    {
        "number": 14,
        "symbol": "䷍",
        "name": "大有",
        "pinyin": "Dà Yǒu",
        "lines": (1, 1, 1, 1, 0, 1),
        "image_zh": "火在天上，大有；君子以遏惡揚善",
        "judgement_zh": "大有，柔得尊位大中，而上下應之，曰大有。其德剛健而文明，應乎天而時行。",
        "image": "Fire in heaven; the noble one suppresses evil and promotes good",
        "judgement": "Great possession: the yielding attains the place of honor, greatly centered, as above and below respond. Its virtue is strong yet elegant, aligned with heaven, acting in season.",
        "wilhelm": "Virtue accumulated at one's center prevents loss. Authentic sincerity inspires compliance — heavenly support rewards sustained virtue.",
    },
    {
        "number": 15,
        "symbol": "䷎",
        "name": "謙",
        "pinyin": "Qiān",
        "lines": (0, 0, 1, 0, 0, 0),
        "image_zh": "地中有山，謙；君子以裒多益寡，稱物平施",
        "judgement_zh": "謙，亨。天道下濟而光明，地道卑而上行。天道虧盈而益謙，地道變盈而流謙。",
        "image": "A mountain within the earth; the noble one reduces excess to increase what is lacking, weighing things to distribute fairly",
        "judgement": "Modesty prevails. Heaven's way descends and shines; earth's way is lowly yet rises. Heaven diminishes the full and blesses the modest; earth transforms the full and flows toward the humble.",
        "wilhelm": "Heaven's way is to make full things less and to augment modest ones. Modesty carries things to completion — it is the handle by which the Way is grasped.",
    },
    {
        "number": 16,
        "symbol": "䷏",
        "name": "豫",
        "pinyin": "Yù",
        "lines": (0, 0, 0, 1, 0, 0),
        "image_zh": "雷出地奮，豫。先王以作樂崇德，殷薦之上帝，以配祖考",
        "judgement_zh": "豫，剛應而志行，順以動，豫。豫順以動，故天地如之，而況建侯行師乎。",
        "image": "Thunder emerges from earth; the ancient kings made music to honor virtue",
        "judgement": "Enthusiasm: the firm responds and will is carried out, moving in accord. Heaven and earth move in harmony — how much more so establishing leaders and mobilizing armies.",
        "wilhelm": "Enthusiasm organizes disparate elements through natural attraction, not force. A sober awakening from false enthusiasm is quite possible and favorable.",
    },
    {
        "number": 17,
        "symbol": "䷐",
        "name": "隨",
        "pinyin": "Suí",
        "lines": (1, 0, 0, 1, 1, 0),
        "image_zh": "澤中有雷，隨；君子以嚮晦入宴息",
        "judgement_zh": "隨，剛來而下柔，動而說，隨。大亨貞，無咎，而天下隨時。",
        "image": "Thunder within the lake; the noble one returns home at dusk to rest",
        "judgement": "Following: the firm comes to serve the yielding, moving with joy. Great success through constancy, no blame — all under heaven follows the season.",
        "wilhelm": "To follow what is correct brings good fortune — one does not lose oneself. Alignment with proper principles transforms both individual and circumstances.",
    },
    {
        "number": 18,
        "symbol": "䷑",
        "name": "蠱",
        "pinyin": "Gǔ",
        "lines": (0, 1, 1, 0, 0, 1),
        "image_zh": "山下有風，蠱；君子以振民育德",
        "judgement_zh": "蠱，剛上而柔下，巽而止，蠱。蠱元亨，而天下治也。",
        "image": "Wind below the mountain; the noble one stirs the people and nurtures virtue",
        "judgement": "Decay: firm above, yielding below; penetrating yet still, this is corruption. Working on what has decayed brings great success — the world is set right.",
        "wilhelm": "Rectifying inherited errors requires conscious engagement with old patterns. Stir up the people and strengthen their spirit — repair involves motivating others.",
    },
    {
        "number": 19,
        "symbol": "䷒",
        "name": "臨",
        "pinyin": "Lín",
        "lines": (1, 1, 0, 0, 0, 0),
        "image_zh": "澤上有地，臨；君子以教思無窮，容保民無疆",
        "judgement_zh": "臨，剛浸而長，說而順，剛中而應。大亨以正，天之道也。",
        "image": "Earth above the lake; the noble one teaches and reflects without limit, protecting the people without bounds",
        "judgement": "Approach: the firm swells and grows, joyous yet yielding, centered and responsive. Great success through what is right — this is heaven's way.",
        "wilhelm": "Walk in the middle. The will is directed inward — true progress comes from inner foundation rather than external achievements.",
    },
    {
        "number": 20,
        "symbol": "䷓",
        "name": "觀",
        "pinyin": "Guān",
        "lines": (0, 0, 0, 0, 1, 1),
        "image_zh": "風行地上，觀；先王以省方觀民設教",
        "judgement_zh": "大觀在上，順而巽，中正以觀天下。觀盥而不薦，有孚顒若。",
        "image": "Wind moves over earth; the ancient kings inspected regions and observed the people to guide them",
        "judgement": "Great contemplation above — yielding and penetrating, centered to view all under heaven. The ritual cleansing before the offering: sincerity fills all with reverence.",
        "wilhelm": "Genuine authority derives from understanding those you serve. Contemplation precedes action — self-examination is prerequisite for meaningful change.",
    },
    {
        "number": 21,
        "symbol": "䷔",
        "name": "噬嗑",
        "pinyin": "Shì Kè",
        "lines": (1, 0, 0, 1, 0, 1),
        "image_zh": "雷電噬嗑；先王以明罰敕法",
        "judgement_zh": "頤中有物，曰噬嗑。噬嗑而亨，剛柔分，動而明，雷電合而章。",
        "image": "Thunder and lightning; the ancient kings clarified penalties and refined laws",
        "judgement": "Something in the jaws must be bitten through. Biting through succeeds: firm and yielding separate, movement brings clarity — thunder and lightning unite in brilliance.",
        "wilhelm": "Resolving obstacles requires both clarity about what needs addressing and willingness to take firm corrective action. Thunder and lightning work together.",
    },
    {
        "number": 22,
        "symbol": "䷕",
        "name": "賁",
        "pinyin": "Bì",
        "lines": (1, 0, 1, 0, 0, 1),
        "image_zh": "山下有火，賁；君子以明庶政，无敢折獄",
        "judgement_zh": "賁，亨，柔來而文剛，故亨。分剛上而文柔，故小利有攸往。",
        "image": "Fire below the mountain; the noble one brings clarity to governance but dare not rashly decide legal cases",
        "judgement": "Grace and success: the yielding adorns the firm, hence success. The firm rises to pattern the yielding — small advantage in having somewhere to go.",
        "wilhelm": "The attribute of art consists of discarding nonessential adornments. Highest spirituality connects with complete absence of outward pretense.",
    },
    {
        "number": 23,
        "symbol": "䷖",
        "name": "剝",
        "pinyin": "Bō",
        "lines": (0, 0, 0, 0, 0, 1),
        "image_zh": "山附於地，剝；上以厚下安宅",
        "judgement_zh": "剝，剝也，柔變剛也。不利有攸往，小人長也。順而止之，觀象也。",
        "image": "Mountain rests upon earth; the ruler enriches those below to secure the dwelling",
        "judgement": "Splitting apart: the yielding erodes the firm. Unfavorable to go anywhere — the inferior is growing. Yield and halt; observe the signs.",
        "wilhelm": "Superior individuals survive by understanding natural rhythms. Decay precedes renewal — endure disintegration through steadfastness.",
    },
    {
        "number": 24,
        "symbol": "䷗",
        "name": "復",
        "pinyin": "Fù",
        "lines": (1, 0, 0, 0, 0, 0),
        "image_zh": "雷在地中，復；先王以至日閉關",
        "judgement_zh": "復亨，剛反，動而以順行，是以出入無疾，朋來無咎。",
        "image": "Thunder within the earth; the ancient kings closed the gates at solstice",
        "judgement": "Return and success: the firm returns, moving in accord with the natural flow. Coming and going without harm; friends arrive without blame.",
        "wilhelm": "Turn away from the confusion of external things, back to your inner light. In the depths of the soul, one sees the Divine — germinal, a potentiality.",
    },
    {
        "number": 25,
        "symbol": "䷘",
        "name": "无妄",
        "pinyin": "Wú Wàng",
        "lines": (1, 0, 0, 1, 1, 1),
        "image_zh": "天下雷行，物與无妄；先王以茂對時育萬物",
        "judgement_zh": "无妄，剛自外來而為主於內。動而健，剛中而應，大亨以正，天之命也。",
        "image": "Thunder moves beneath heaven; the ancient kings nourished all things in accord with the seasons",
        "judgement": "Innocence: the firm arrives from outside to rule within, moving with strength, centered and responsive. Great success through right action — this is heaven's decree.",
        "wilhelm": "Act from the heart without ulterior motive. When unexpected misfortune strikes, accept it without seeking remedy — medicine cannot cure what is destined.",
    },
    {
        "number": 26,
        "symbol": "䷙",
        "name": "大畜",
        "pinyin": "Dà Xù",
        "lines": (1, 1, 1, 0, 0, 1),
        "image_zh": "天在山中，大畜；君子以多識前言往行",
        "judgement_zh": "大畜，剛健篤實輝光，日新其德。剛上而尚賢，能止健，大正也。",
        "image": "Heaven within the mountain; the noble one learns much from the words and deeds of the past",
        "judgement": "Great taming: firm and strong, sincere and solid, radiant in light, daily renewing virtue. The firm rises to honor the worthy — able to restrain strength, this is great correctness.",
        "wilhelm": "Become acquainted with many sayings of antiquity and deeds of the past to strengthen character. Once mastery is achieved, unlimited potential becomes accessible.",
    },
    {
        "number": 27,
        "symbol": "䷚",
        "name": "頤",
        "pinyin": "Yí",
        "lines": (1, 0, 0, 0, 0, 1),
        "image_zh": "山下有雷，頤；君子以慎言語，節飲食",
        "judgement_zh": "頤，貞吉，養正則吉也。觀頤，觀其所養也。自求口實，觀其自養也。",
        "image": "Thunder below the mountain; the noble one is careful with words and moderate in eating",
        "judgement": "Nourishment: correctness brings fortune — nourishing what is right brings fortune. Observe what one nourishes; observe how one seeks to fill the mouth.",
        "wilhelm": "Those positioned higher illuminate and empower those below through proper nourishment. Nourishment is the transmission of insight and capability.",
    },
    {
        "number": 28,
        "symbol": "䷛",
        "name": "大過",
        "pinyin": "Dà Guò",
        "lines": (0, 1, 1, 1, 1, 0),
        "image_zh": "澤滅木，大過；君子以獨立不懼，遯世无悶",
        "judgement_zh": "大過，大者過也。棟橈，本末弱也。剛過而中，巽而說行，利有攸往。",
        "image": "Lake submerges the trees; the noble one stands alone without fear, withdrawing from the world without regret",
        "judgement": "Great excess: the great exceeds its bounds, the ridgepole sags — beginning and end are weak. Yet the firm exceeds while centered; gentle and joyous in action, advantage in going forward.",
        "wilhelm": "When standing alone, be unconcerned; if you must renounce the world, be undaunted. Maintain inner equanimity regardless of isolation.",
    },
    {
        "number": 29,
        "symbol": "䷜",
        "name": "坎",
        "pinyin": "Kǎn",
        "lines": (0, 1, 0, 0, 1, 0),
        "image_zh": "水洊至，習坎；君子以常德行，習教事",
        "judgement_zh": "習坎，重險也。水流而不盈，行險而不失其信。維心亨，乃以剛中也。",
        "image": "Water flows continuously; the noble one maintains constant virtue and practices teaching",
        "judgement": "Repeated danger — danger doubled. Water flows on without filling, traversing peril without losing its truth. The heart's persistence prevails through firmness at center.",
        "wilhelm": "Water flows on uninterruptedly and reaches its goal. Maintain virtue and continue meaningful work even amid peril.",
    },
    {
        "number": 30,
        "symbol": "䷝",
        "name": "離",
        "pinyin": "Lí",
        "lines": (1, 0, 1, 1, 0, 1),
        "image_zh": "明兩作，離；大人以繼明照于四方",
        "judgement_zh": "離，麗也。日月麗乎天，百穀草木麗乎土。重明以麗乎正，乃化成天下。",
        "image": "Brightness doubled; the great one spreads continuous light to all directions",
        "judgement": "Clinging means radiance: sun and moon cling to heaven, grains and plants cling to earth. Doubled brightness cleaving to what is right — thus transforming all under heaven.",
        "wilhelm": "The beginning holds the seed of all that follows. Clinging to temporary states — joy or sorrow — creates instability. Find the middle way.",
    },
    {
        "number": 31,
        "symbol": "䷞",
        "name": "咸",
        "pinyin": "Xián",
        "lines": (0, 0, 1, 1, 1, 0),
        "image_zh": "山上有澤，咸；君子以虛受人",
        "judgement_zh": "咸，感也。柔上而剛下，二氣感應以相與。止而說，男下女，是以亨利貞。",
        "image": "Lake upon the mountain; the noble one receives others with emptiness",
        "judgement": "Influence means mutual feeling: yielding above, firm below — two energies sensing and responding. Stillness with joy, the man placing himself below the woman — hence success through constancy.",
        "wilhelm": "The superior person encourages approach through willingness to receive. Authentic influence flows from inner clarity, not calculated manipulation.",
    },
    {
        "number": 32,
        "symbol": "䷟",
        "name": "恆",
        "pinyin": "Héng",
        "lines": (0, 1, 1, 1, 0, 0),
        "image_zh": "雷風恆；君子以立不易方",
        "judgement_zh": "恆，久也。剛上而柔下，雷風相與，巽而動，剛柔皆應，恆。",
        "image": "Thunder and wind endure; the noble one stands firm without changing direction",
        "judgement": "Duration means enduring: firm above, yielding below — thunder and wind together, penetrating yet moving, firm and yielding each responding. This is constancy.",
        "wilhelm": "Consistency through balance — maintain a central position and fulfill your appropriate role. Persistence must align with proper placement, not blind stubbornness.",
    },
    {
        "number": 33,
        "symbol": "䷠",
        "name": "遯",
        "pinyin": "Dùn",
        "lines": (0, 0, 1, 1, 1, 1),
        "image_zh": "天下有山，遯；君子以遠小人，不惡而嚴",
        "judgement_zh": "遯亨，遯而亨也。剛當位而應，與時行也。小利貞，浸而長也。",
        "image": "Mountain under heaven; the noble one keeps distance from petty people, firm but not hostile",
        "judgement": "Retreat and success: retreating yet prospering. The firm holds its place responsively, moving with the time. Small advantage in constancy — for now the dark gradually grows.",
        "wilhelm": "Retreat succeeds through proper timing. Hatred binds you to the hated object — dignified disassociation enables successful withdrawal.",
    },
    {
        "number": 34,
        "symbol": "䷡",
        "name": "大壯",
        "pinyin": "Dà Zhuàng",
        "lines": (1, 1, 1, 1, 0, 0),
        "image_zh": "雷在天上，大壯；君子以非禮弗履",
        "judgement_zh": "大壯，大者壯也。剛以動，故壯。大壯利貞，大者正也。",
        "image": "Thunder in heaven; the noble one does not tread where propriety forbids",
        "judgement": "Great power: the great is strong, the firm moves — hence strength. Great power benefits through constancy; the great must be correct.",
        "wilhelm": "The inferior man uses his power; this the superior man does not do. Great power must be governed by restraint.",
    },
    {
        "number": 35,
        "symbol": "䷢",
        "name": "晉",
        "pinyin": "Jìn",
        "lines": (0, 0, 0, 1, 0, 1),
        "image_zh": "明出地上，晉；君子以自昭明德",
        "judgement_zh": "晉，進也。明出地上，順而麗乎大明，柔進而上行。",
        "image": "Brightness emerges above earth; the noble one illuminates their own virtue",
        "judgement": "Progress means advancing: brightness emerges above earth, yielding yet cleaving to great clarity. The soft advances and moves upward.",
        "wilhelm": "Progress comes through developing one's own character. In times of advancement, unethical shortcuts become tempting but ultimately expose themselves.",
    },
    {
        "number": 36,
        "symbol": "䷣",
        "name": "明夷",
        "pinyin": "Míng Yí",
        "lines": (1, 0, 1, 0, 0, 0),
        "image_zh": "明入地中，明夷；君子以蒞眾用晦而明",
        "judgement_zh": "明入地中，明夷。內文明而外柔順，以蒙大難，文王以之。",
        "image": "Brightness enters the earth; the noble one governs by concealing brilliance within",
        "judgement": "Brightness enters earth — the light is wounded. Inwardly cultured, outwardly yielding, enduring great hardship. Thus did King Wen survive.",
        "wilhelm": "The light has sunk into earth. Veil your light yet still shine — adversity tests character, but concealed integrity ultimately prevails.",
    },
    {
        "number": 37,
        "symbol": "䷤",
        "name": "家人",
        "pinyin": "Jiā Rén",
        "lines": (1, 0, 1, 0, 1, 1),
        "image_zh": "風自火出，家人；君子以言有物而行有恆",
        "judgement_zh": "家人，女正位乎內，男正位乎外。男女正，天地之大義也。家人有嚴君焉，父母之謂也。",
        "image": "Wind comes from fire; the noble one speaks with substance and acts with consistency",
        "judgement": "The family: woman correct in her place within, man correct in his place without — this is heaven and earth's great principle. The family has its stern ruler: this means father and mother.",
        "wilhelm": "Make demands first of all upon oneself. Personal integrity and self-examination form the foundation for familial and social order.",
    },
    {
        "number": 38,
        "symbol": "䷥",
        "name": "睽",
        "pinyin": "Kuí",
        "lines": (1, 1, 0, 1, 0, 1),
        "image_zh": "上火下澤，睽；君子以同而異",
        "judgement_zh": "睽，火動而上，澤動而下。二女同居，其志不同行。說而麗乎明，柔進而上行。",
        "image": "Fire above, lake below; the noble one finds unity within difference",
        "judgement": "Opposition: fire moves up, lake moves down — two daughters dwell together yet their wills diverge. Joyous yet cleaving to clarity; the yielding advances upward.",
        "wilhelm": "Fire and lake: their natures diverge, yet they can illuminate each other. In times of opposition, attend to small matters; great undertakings breed mistrust.",
    },
    {
        "number": 39,
        "symbol": "䷦",
        "name": "蹇",
        "pinyin": "Jiǎn",
        "lines": (0, 0, 1, 0, 1, 0),
        "image_zh": "山上有水，蹇；君子以反身修德",
        "judgement_zh": "蹇，難也，險在前也。見險而能止，知矣哉。蹇利西南，往得中也。",
        "image": "Water upon the mountain; the noble one turns inward to cultivate virtue",
        "judgement": "Obstruction means difficulty — danger lies ahead. Seeing danger and able to stop: this is wisdom. Obstruction favors the southwest; going there finds the center.",
        "wilhelm": "Impasse is an opportunity for self-examination. Turn attention inward and submit to higher wisdom rather than forcing external progress.",
    },
    {
        "number": 40,
        "symbol": "䷧",
        "name": "解",
        "pinyin": "Xiè",
        "lines": (0, 1, 0, 1, 0, 0),
        "image_zh": "雷雨作，解；君子以赦過宥罪",
        "judgement_zh": "解，險以動，動而免乎險，解。解利西南，往得眾也。",
        "image": "Thunder and rain arise; the noble one pardons mistakes and forgives faults",
        "judgement": "Deliverance: danger spurs movement; moving to escape peril, this is release. Deliverance favors the southwest — going there wins the multitude.",
        "wilhelm": "Thunder and rain bring release. The superior man pardons mistakes and forgives misdeeds — when deliverance comes, return swiftly to rest.",
    },
    {
        "number": 41,
        "symbol": "䷨",
        "name": "損",
        "pinyin": "Sǔn",
        "lines": (1, 1, 0, 0, 0, 1),
        "image_zh": "山下有澤，損；君子以懲忿窒欲",
        "judgement_zh": "損，損下益上，其道上行。損而有孚，元吉無咎，可貞。",
        "image": "Lake below the mountain; the noble one controls anger and restrains desire",
        "judgement": "Decrease: lessening below to increase above — its way moves upward. Decrease with sincerity: great fortune, no blame; one may persevere.",
        "wilhelm": "Control anger and restrain instincts. True compensation occurs through internal regulation — moderate the lower self to allow higher wisdom to manifest.",
    },
    {
        "number": 42,
        "symbol": "䷩",
        "name": "益",
        "pinyin": "Yì",
        "lines": (1, 0, 0, 0, 1, 1),
        "image_zh": "風雷益；君子以見善則遷，有過則改",
        "judgement_zh": "益，損上益下，民說無疆。自上下下，其道大光。利有攸往，中正有慶。",
        "image": "Wind and thunder increase; the noble one moves toward good and corrects faults",
        "judgement": "Increase: lessening above to increase below — the people rejoice without limit. Descending from on high, its way shines greatly. Advantage in having somewhere to go; centered and correct brings blessing.",
        "wilhelm": "When the superior man sees good, he moves toward it. When he has faults, he corrects them. To rule truly is to serve — decrease oneself to increase the people.",
    },
    {
        "number": 43,
        "symbol": "䷪",
        "name": "夬",
        "pinyin": "Guài",
        "lines": (1, 1, 1, 1, 1, 0),
        "image_zh": "澤上於天，夬；君子以施祿及下，居德則忌",
        "judgement_zh": "夬，決也，剛決柔也。健而說，決而和。揚于王庭，柔乘五剛也。",
        "image": "Lake rises to heaven; the noble one distributes blessings to those below, dwelling in virtue and shunning excess",
        "judgement": "Breakthrough: resolution — the firm displaces the yielding. Strong yet joyous, decisive yet harmonious. Proclaimed in the king's court: the yielding rides upon five strong lines.",
        "wilhelm": "Resoluteness requires both preparation and balance. Act from the middle way rather than from pride, stubbornness, or insufficient readiness.",
    },
    {
        "number": 44,
        "symbol": "䷫",
        "name": "姤",
        "pinyin": "Gòu",
        "lines": (0, 1, 1, 1, 1, 1),
        "image_zh": "天下有風，姤；后以施命誥四方",
        "judgement_zh": "姤，遇也，柔遇剛也。勿用取女，不可與長也。天地相遇，品物咸章也。",
        "image": "Wind beneath heaven; the ruler proclaims commands to all directions",
        "judgement": "Coming to meet: the yielding encounters the firm. Do not marry such a woman — one cannot grow with her. When heaven and earth meet, all creatures become manifest.",
        "wilhelm": "Insignificant forces must be tolerated to keep them well disposed. Work through patience and character rather than harsh rejection.",
    },
    {
        "number": 45,
        "symbol": "䷬",
        "name": "萃",
        "pinyin": "Cuì",
        "lines": (0, 0, 0, 1, 1, 0),
        "image_zh": "澤上於地，萃；君子以除戎器，戒不虞",
        "judgement_zh": "萃，聚也。順以說，剛中而應，故聚也。王假有廟，致孝享也。",
        "image": "Lake upon earth; the noble one prepares weapons and guards against the unexpected",
        "judgement": "Gathering: assembly. Yielding with joy, the firm centered and responsive — hence gathering. The king approaches his temple: this expresses devoted reverence.",
        "wilhelm": "Genuine gathering requires subordinating ego to larger purpose. When individuals sacrifice personal gain for collective harmony, conditions become favorable.",
    },
    {
        "number": 46,
        "symbol": "䷭",
        "name": "升",
        "pinyin": "Shēng",
        "lines": (0, 1, 1, 0, 0, 0),
        "image_zh": "地中生木，升；君子以順德，積小以高大",
        "judgement_zh": "柔以時升，巽而順，剛中而應，是以大亨。用見大人，勿恤，有慶也。",
        "image": "Wood grows within earth; the noble one accumulates small virtues to achieve greatness",
        "judgement": "Pushing upward: the yielding rises with the season — penetrating and compliant, the firm centered and responsive, hence great success. Going to see the great person, do not worry; there will be blessing.",
        "wilhelm": "Authentic advancement requires sincerity and devotion. Measured progress fulfills aims; unchecked ambition at one's peak leads to loss.",
    },
    {
        "number": 47,
        "symbol": "䷮",
        "name": "困",
        "pinyin": "Kùn",
        "lines": (0, 1, 0, 1, 1, 0),
        "image_zh": "澤無水，困；君子以致命遂志",
        "judgement_zh": "困，剛揜也。險以說，困而不失其所亨，其唯君子乎。",
        "image": "Lake without water; the noble one risks life to fulfill their purpose",
        "judgement": "Oppression: the firm is eclipsed. Danger meets joy; exhausted yet not losing what brings success — only the noble one can do this.",
        "wilhelm": "Outer circumstances press inward, yet the heart remains free. The superior man perseveres with inner cheerfulness that cannot be exhausted.",
    },
    {
        "number": 48,
        "symbol": "䷯",
        "name": "井",
        "pinyin": "Jǐng",
        "lines": (0, 1, 1, 0, 1, 0),
        "image_zh": "木上有水，井；君子以勞民勸相",
        "judgement_zh": "巽乎水而上水，井。井養而不窮也。改邑不改井，乃以剛中也。",
        "image": "Water above wood; the noble one encourages the people to help one another",
        "judgement": "The well: wood penetrates and draws up water. The well nourishes without exhausting. Towns change but the well does not — this is due to firmness at center.",
        "wilhelm": "A man must put himself in order. The best water is only potential refreshment until brought up — wisdom only matters when transformed into lived experience.",
    },
    {
        "number": 49,
        "symbol": "䷰",
        "name": "革",
        "pinyin": "Gé",
        "lines": (1, 0, 1, 1, 1, 0),
        "image_zh": "澤中有火，革；君子以治曆明時",
        "judgement_zh": "革，水火相息，二女同居，其志不相得，曰革。巳日乃孚，革而信之。",
        "image": "Fire within the lake; the noble one orders the calendar and clarifies the seasons",
        "judgement": "Revolution: water and fire oppose each other; two daughters dwell together but their wills clash — hence revolution. On the accomplished day comes trust; change and be believed.",
        "wilhelm": "Genuine transformation cannot be forced prematurely. When talk of revolution has gone three rounds, one may commit.",
    },
    {
        "number": 50,
        "symbol": "䷱",
        "name": "鼎",
        "pinyin": "Dǐng",
        "lines": (0, 1, 1, 1, 0, 1),
        "image_zh": "木上有火，鼎；君子以正位凝命",
        "judgement_zh": "鼎，象也。以木巽火，亨飪也。聖人亨以享上帝，而大亨以養聖賢。",
        "image": "Fire above wood; the noble one rectifies their position and fulfills destiny",
        "judgement": "The cauldron: a symbol. Wood feeds fire for cooking. The sage offers sacrifice to the supreme; great nourishment to cultivate the wise and worthy.",
        "wilhelm": "The superior man consolidates fate by making position correct. Personal integrity is an active consolidation of life direction.",
    },
    {
        "number": 51,
        "symbol": "䷲",
        "name": "震",
        "pinyin": "Zhèn",
        "lines": (1, 0, 0, 1, 0, 0),
        "image_zh": "洊雷震；君子以恐懼修省",
        "judgement_zh": "震亨，震來虩虩，恐致福也。笑言啞啞，後有則也。",
        "image": "Repeated thunder; the noble one cultivates reverence and self-reflection",
        "judgement": "Thunder and success: the shock arrives with fear and trembling — fear brings blessing. Laughter and talk follow; afterward comes proper measure.",
        "wilhelm": "Fear brings good fortune; afterward one has a rule. The superior man uses apprehension as a catalyst for establishing proper principles.",
    },
    {
        "number": 52,
        "symbol": "䷳",
        "name": "艮",
        "pinyin": "Gèn",
        "lines": (0, 0, 1, 0, 0, 1),
        "image_zh": "兼山艮；君子以思不出其位",
        "judgement_zh": "艮，止也。時止則止，時行則行，動靜不失其時，其道光明。",
        "image": "Mountains joined together; the noble one keeps thoughts within their place",
        "judgement": "Keeping still means stopping. When it is time to stop, stop; when time to act, act. Movement and rest do not miss their moment — this way shines bright.",
        "wilhelm": "The superior man does not permit thoughts to go beyond the situation. Noble-hearted keeping still leads to complete inner development.",
    },
    {
        "number": 53,
        "symbol": "䷴",
        "name": "漸",
        "pinyin": "Jiàn",
        "lines": (0, 0, 1, 0, 1, 1),
        "image_zh": "山上有木，漸；君子以居賢德善俗",
        "judgement_zh": "漸之進也，女歸吉也。進得位，往有功也。進以正，可以正邦也。",
        "image": "Wood upon the mountain; the noble one dwells in virtue and improves customs",
        "judgement": "Development: gradual progress. The maiden marrying brings fortune — advancing finds its place, going forward brings achievement. Advancing through rightness, one may set the state in order.",
        "wilhelm": "The wild goose approaches the shore step by step. The superior man abides in dignity and virtue, and thereby improves the customs of the people.",
    },
    {
        "number": 54,
        "symbol": "䷵",
        "name": "歸妹",
        "pinyin": "Guī Mèi",
        "lines": (1, 1, 0, 1, 0, 0),
        "image_zh": "澤上有雷，歸妹；君子以永終知敝",
        "judgement_zh": "歸妹，天地之大義也。天地不交而萬物不興。歸妹，人之終始也。",
        "image": "Thunder above the lake; the noble one understands flaws by considering the end",
        "judgement": "The marrying maiden: heaven and earth's great meaning. Without their union, nothing flourishes. The maiden's marriage marks the end and beginning of human life.",
        "wilhelm": "The superior man understands the transitory in light of eternity. Recognize emerging tendencies early; guide them before they become unmanageable.",
    },
    {
        "number": 55,
        "symbol": "䷶",
        "name": "豐",
        "pinyin": "Fēng",
        "lines": (1, 0, 1, 1, 0, 0),
        "image_zh": "雷電皆至，豐；君子以折獄致刑",
        "judgement_zh": "豐，大也。明以動，故豐。王假之，尚大也。勿憂宜日中。",
        "image": "Thunder and lightning arrive together; the noble one decides cases and applies consequences",
        "judgement": "Abundance means greatness: clarity with movement, hence fullness. The king reaches this — exalting what is great. Do not worry; be like the sun at noon.",
        "wilhelm": "Abundance requires maintaining clarity. The superior man rouses will through trustworthiness — sincerity is the foundation for influence.",
    },
    {
        "number": 56,
        "symbol": "䷷",
        "name": "旅",
        "pinyin": "Lǚ",
        "lines": (0, 0, 1, 1, 0, 1),
        "image_zh": "山上有火，旅；君子以明慎用刑而不留獄",
        "judgement_zh": "旅，小亨，柔得中乎外而順乎剛。止而麗乎明，是以小亨，旅貞吉也。",
        "image": "Fire upon the mountain; the noble one applies consequences wisely, resolves matters swiftly",
        "judgement": "The wanderer: small success. The yielding finds center outside, complying with the firm; resting yet cleaving to clarity — hence small success. The wanderer's constancy brings fortune.",
        "wilhelm": "The wanderer's resolve and respectful conduct determine outcomes. If one deals like a stranger with subordinates, one rightly loses them.",
    },
    {
        "number": 57,
        "symbol": "䷸",
        "name": "巽",
        "pinyin": "Xùn",
        "lines": (0, 1, 1, 0, 1, 1),
        "image_zh": "隨風巽；君子以申命行事",
        "judgement_zh": "重巽以申命，剛巽乎中正而志行，柔皆順乎剛。是以小亨，利有攸往。",
        "image": "Winds following; the noble one reiterates commands and carries out affairs",
        "judgement": "The gentle doubled to spread commands: the firm penetrates to what is centered and correct, and will is carried out. The yielding all follow the firm — hence small success, advantage in having somewhere to go.",
        "wilhelm": "Wind follows upon wind. The gentle penetrates as water wears away stone — not through force, but through quiet persistence in a single direction.",
    },
    {
        "number": 58,
        "symbol": "䷹",
        "name": "兌",
        "pinyin": "Duì",
        "lines": (1, 1, 0, 1, 1, 0),
        "image_zh": "麗澤兌；君子以朋友講習",
        "judgement_zh": "兌，說也。剛中而柔外，說以利貞，是以順乎天而應乎人。",
        "image": "Lakes joined together; the noble one discusses and learns with friends",
        "judgement": "The joyous means joy: firm within, yielding without; joy with beneficial constancy. Thus one accords with heaven and responds to humanity.",
        "wilhelm": "Genuine joy arises from unwavering confidence in one's authentic purpose. It rests with the individual whether to let oneself be seduced.",
    },
    {
        "number": 59,
        "symbol": "䷺",
        "name": "渙",
        "pinyin": "Huàn",
        "lines": (0, 1, 0, 0, 1, 1),
        "image_zh": "風行水上，渙；先王以享于帝立廟",
        "judgement_zh": "渙亨，剛來而不窮，柔得位乎外而上同。王假有廟，王乃在中也。",
        "image": "Wind moves over water; the ancient kings made offerings and established temples",
        "judgement": "Dispersion and success: the firm comes without exhausting, the yielding finds place outside and unites above. The king approaches his temple — the king takes his place at center.",
        "wilhelm": "In times of general disunity, a great idea provides a focal point for recovery. Spiritual clarity enables reorganization of fractured elements.",
    },
    {
        "number": 60,
        "symbol": "䷻",
        "name": "節",
        "pinyin": "Jié",
        "lines": (1, 1, 0, 0, 1, 0),
        "image_zh": "澤上有水，節；君子以制數度，議德行",
        "judgement_zh": "節亨，剛柔分而剛得中。苦節不可貞，其道窮也。",
        "image": "Water above the lake; the noble one establishes measures and deliberates on virtuous conduct",
        "judgement": "Limitation and success: firm and yielding separate, yet the firm finds center. Bitter limitation cannot be held to — its way leads to exhaustion.",
        "wilhelm": "Proper boundaries create internal strength. By holding back, one accumulates energy to act with force when the time comes.",
    },
    {
        "number": 61,
        "symbol": "䷼",
        "name": "中孚",
        "pinyin": "Zhōng Fú",
        "lines": (1, 1, 0, 0, 1, 1),
        "image_zh": "澤上有風，中孚；君子以議獄緩死",
        "judgement_zh": "中孚，柔在內而剛得中，說而巽，孚乃化邦也。豚魚吉，信及豚魚也。",
        "image": "Wind above the lake; the noble one deliberates on cases and delays executions",
        "judgement": "Inner truth: yielding within, firm at center; joyous yet penetrating — sincerity transforms the state. Fortune with pigs and fish: sincerity reaches even pigs and fish.",
        "wilhelm": "True power emerges from internal character. Without central transformative force from within, external unity becomes deception.",
    },
    {
        "number": 62,
        "symbol": "䷽",
        "name": "小過",
        "pinyin": "Xiǎo Guò",
        "lines": (0, 0, 1, 1, 0, 0),
        "image_zh": "山上有雷，小過；君子以行過乎恭",
        "judgement_zh": "小過，小者過而亨也。過以利貞，與時行也。柔得中，是以小事吉也。",
        "image": "Thunder above the mountain; the noble one exceeds in reverence",
        "judgement": "Small exceeding: the small exceeds and succeeds. Exceeding benefits through constancy, moving with the season. The yielding finds center — hence fortune in small matters.",
        "wilhelm": "The superior man fixes eyes more closely on duty than the ordinary person. Genuine strength lies in meticulous attention to conduct.",
    },
    {
        "number": 63,
        "symbol": "䷾",
        "name": "既濟",
        "pinyin": "Jì Jì",
        "lines": (1, 0, 1, 0, 1, 0),
        "image_zh": "水在火上，既濟；君子以思患而預防之",
        "judgement_zh": "既濟亨小，利貞。剛柔正而位當也。初吉，柔得中也。終止則亂，其道窮也。",
        "image": "Water above fire; the noble one anticipates trouble and prepares against it",
        "judgement": "After completion: small success, beneficial constancy. Firm and yielding correct in their proper places. Good at the beginning — the yielding finds center. Stopping at the end brings disorder, for the way exhausts itself.",
        "wilhelm": "Small sincere efforts aligned with circumstances succeed better than grandiose displays. Know when to stop; restraint prevents disorder.",
    },
    {
        "number": 64,
        "symbol": "䷿",
        "name": "未濟",
        "pinyin": "Wèi Jì",
        "lines": (0, 1, 0, 1, 0, 1),
        "image_zh": "火在水上，未濟；君子以慎辨物居方",
        "judgement_zh": "未濟亨，柔得中也。小狐汔濟，未出中也。濡其尾，無攸利，不續終也。",
        "image": "Fire above water; the noble one carefully discerns things and places them properly",
        "judgement": "Before completion and success: the yielding finds center. The little fox nearly crosses — not yet out of the middle. Wetting its tail, no advantage; the end is not yet continued.",
        "wilhelm": "Proper positioning combined with unwavering correctness produces meaningful change. Internal alignment precedes external transformation.",
    },
)


def get_hexagram(number: int) -> Dict[str, Any]:
    """Look up a hexagram entry by its King Wen number (1..64)."""
    if not 1 <= number <= len(HEXAGRAMS):
        raise ValueError(f"Hexagram number out of range: {number}")
    return HEXAGRAMS[number - 1]
