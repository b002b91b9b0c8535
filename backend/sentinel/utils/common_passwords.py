"""
Common password corpus and the Bloom filter built from it

The corpus is a public list of frequently breached passwords (top entries of
the SecLists "10k most common" list). These are not user passwords.
"""
from .bloom_filter import BloomFilter

BLOOM_SIZE = 12000
BLOOM_HASH_COUNT = 7

COMMON_PASSWORDS = (
    # Top of the list
    'password', '123456', '123456789', '12345678', '12345', '1234567',
    'password1', '123123', '1234567890', 'qwerty', 'abc123',
    'qwerty123', '1q2w3e4r', 'admin', 'letmein', 'welcome', 'monkey',
    'dragon', '1234', '111111', '000000', 'iloveyou', '1qaz2wsx',
    'qwertyuiop', '123qwe', 'zxcvbnm', 'asdfgh', 'asdfghjkl', '654321',
    '666666', '7777777', '121212', '112233', '123321', '1q2w3e',
    '1q2w3e4r5t', 'qazwsx', 'q1w2e3r4', 'zaq12wsx', 'qwe123', 'a123456',
    '123abc', 'aa123456', 'abcd1234', 'abcdef', 'abc1234', '987654321',
    '11111111', '88888888', '123654', '159753', '147258369', '789456123',
    '123456a', '1234qwer', 'qwer1234', 'asd123', 'azerty', 'qwertz',

    # Common variations
    'password123', 'qwerty1', 'password!', 'P@ssw0rd', 'passw0rd',
    'p@ssword', 'pass123', 'pass1234', 'password12', 'password2',
    'password01', 'passpass', 'pass', 'passwd', 'welcome1', 'welcome123',
    'admin123', 'admin1', 'administrator', 'root', 'toor', 'guest',
    'test', 'test123', 'test1234', 'testing', 'changeme', 'default',
    'letmein1', 'login', 'master', 'master123', 'hello', 'hello123',
    'hellohello', 'iloveyou1', 'iloveu', 'loveme', 'trustno1', 'access',
    'secret', 'secret123', 'temp', 'temp123', 'user', 'user123',
    'qwerty12', 'qwertyu', 'abc12345', 'zxcvbn', 'asdf', 'asdf1234',
    'asdfasdf', 'qweqwe', 'zxczxc', 'aaaaaa', 'abcabc', 'a1b2c3',
    'a1b2c3d4', '1a2b3c', 'q1w2e3', '1qazxsw2', 'qazwsxedc', 'assword',

    # Names
    'michael', 'jordan', 'jordan23', 'jessica', 'jennifer', 'thomas',
    'daniel', 'charlie', 'donald', 'ashley', 'harley', 'jackson',
    'maggie', 'bailey', 'chelsea', 'andrew', 'joshua', 'matthew',
    'anthony', 'robert', 'william', 'nicole', 'hannah', 'amanda',
    'samantha', 'andrea', 'taylor', 'austin', 'hunter', 'hunter2',
    'ginger', 'george', 'michelle', 'sophie', 'jasmine', 'justin',
    'brandon', 'nicholas', 'patrick', 'richard', 'steven', 'eric',
    'david', 'james', 'john', 'johnny', 'joseph', 'kevin', 'brian',
    'jason', 'scott', 'chris', 'christian', 'chris1', 'alexander',
    'alex', 'victoria', 'elizabeth', 'melissa', 'heather', 'rachel',
    'lauren', 'stephanie', 'natasha', 'tiffany', 'vanessa', 'veronica',
    'madison', 'morgan', 'cameron', 'dakota', 'phoenix', 'tigger',
    'buster', 'bandit', 'rocky', 'max', 'lucky', 'molly', 'buddy',
    'charlie1', 'michael1', 'jessica1', 'ashley1', 'daniel1', 'thomas1',
    'robert1', 'jordan1', 'andrew1', 'matthew1', 'anthony1', 'joshua1',
    'maria', 'jesus', 'jesus1', 'christ', 'angel', 'angels', 'angel1',

    # Sports and teams
    'football', 'football1', 'baseball', 'baseball1', 'basketball',
    'soccer', 'soccer1', 'hockey', 'hockey1', 'golf', 'tennis',
    'yankees', 'cowboys', 'lakers', 'steelers', 'eagles', 'packers',
    'redsox', 'chelsea1', 'liverpool', 'arsenal', 'barcelona',
    'newyork', 'boston', 'dallas', 'chicago', 'london', 'paris',
    'raiders', 'broncos', 'chargers', 'giants', 'rangers', 'ranger',
    'panthers', 'bulldogs', 'tigers', 'lions', 'falcons', 'dolphins',
    'warriors', 'spurs', 'celtic', 'united', 'manchester', 'juventus',

    # Pop culture
    'superman', 'batman', 'spiderman', 'starwars', 'pokemon', 'naruto',
    'matrix', 'shadow', 'ninja', 'mustang', 'harley1', 'corvette',
    'ferrari', 'porsche', 'mercedes', 'bmw', 'yamaha', 'suzuki',
    'nintendo', 'playstation', 'xbox360', 'minecraft', 'fortnite',
    'pikachu', 'mickey', 'disney', 'barbie', 'simpsons', 'homer',
    'scooby', 'snoopy', 'garfield', 'gandalf', 'frodo', 'merlin',
    'zelda', 'mario', 'sonic', 'lego', 'marvel', 'avengers', 'thor',
    'ironman', 'hulk', 'joker', 'vader', 'skywalker', 'yoda', 'jedi',
    'metallica', 'nirvana', 'slipknot', 'eminem', 'beatles', 'elvis',

    # Words
    'sunshine', 'princess', 'solo', 'killer', 'internet', 'computer',
    'forever', 'cookie', 'summer', 'summer1', 'winter', 'spring',
    'autumn', 'silver', 'diamond', 'purple', 'orange', 'banana',
    'driver', 'pepper', 'freedom', 'whatever', 'guitar', 'cheese',
    'coffee', 'chicken', 'butterfly', 'flower', 'flowers', 'rainbow',
    'sunflower', 'blossom', 'lovely', 'love', 'lover', 'loveyou',
    'sweetie', 'sweetheart', 'honey', 'baby', 'babygirl', 'babyboy',
    'princess1', 'sunshine1', 'monkey1', 'dragon1', 'shadow1', 'master1',
    'superman1', 'batman1', 'qwerty12345', 'freedom1', 'secret1',
    'money', 'money1', 'monkey123', 'dragon123', 'hunter1', 'pepper1',
    'purple1', 'orange1', 'silver1', 'diamond1', 'cookie1', 'chicken1',
    'apple', 'apples', 'cherry', 'peaches', 'strawberry', 'lemon',
    'mango', 'blueberry', 'chocolate', 'candy', 'sugar', 'cupcake',
    'pizza', 'hamburger', 'bacon', 'muffin', 'biscuit', 'popcorn',
    'tiger', 'lion', 'eagle', 'falcon', 'wolf', 'bear', 'panda',
    'dolphin', 'shark', 'horse', 'horses', 'kitten', 'kitty', 'puppy',
    'doggie', 'monkeys', 'rabbit', 'turtle', 'snake', 'spider', 'fish',
    'blue', 'red', 'green', 'yellow', 'black', 'white', 'pink', 'gold',
    'golden', 'star', 'stars', 'sun', 'moon', 'sky', 'ocean', 'river',
    'mountain', 'forest', 'thunder', 'lightning', 'storm', 'fire',
    'ice', 'snow', 'rain', 'cloud', 'heaven', 'hell', 'devil', 'god',
    'magic', 'wizard', 'dragons', 'knight', 'warrior', 'samurai',
    'pirate', 'viking', 'hacker', 'cyber', 'matrix1', 'zombie',
    'music', 'rock', 'rockstar', 'rockyou', 'party', 'dance', 'happy',
    'smile', 'friend', 'friends', 'family', 'mother', 'father', 'mommy',
    'daddy', 'sister', 'brother', 'school', 'college', 'student',
    'teacher', 'doctor', 'nurse', 'police', 'soldier', 'captain',
    'boss', 'king', 'queen', 'prince', 'lady', 'sexy', 'hottie',
    'beautiful', 'pretty', 'cutie', 'awesome', 'cool', 'crazy',
    'fuckyou', 'fuckoff', 'fuckme', 'asshole', 'bitch', 'shit',
    'pussy', 'dick', 'cock', 'booboo', 'poohbear', 'teddy', 'teddybear',
    'blink182', 'digital', 'network', 'server', 'system', 'windows',
    'linux', 'apple1', 'google', 'yahoo', 'facebook', 'twitter',
    'myspace', 'office', 'company', 'business', 'private', 'personal',
    'security', 'letmein123', 'welcome2', 'unknown', 'nothing',
    'anything', 'something', 'everything', 'nobody', 'someone',
    'qwertyqwerty', 'trustme', 'believe', 'destiny', 'dream', 'dreams',
    'hope', 'faith', 'peace', 'victory', 'winner', 'champion', 'legend',
    'genius', 'smart', 'power', 'energy', 'future', 'infinity', 'zero',
    'nemesis', 'phantom', 'ghost', 'demon', 'angel123', 'lucky7',
    'lucky1', 'charlie123', 'maverick', 'cowboy', 'cowboy1', 'diesel',
    'harrison', 'austin316', 'tucker', 'bullshit', 'fender', 'gibson',
    'marlboro', 'camaro', 'chevy', 'jeep', 'honda', 'toyota', 'nissan',
    'audi', 'volvo', 'jaguar', 'cobra', 'viper', 'falcon1', 'eagle1',

    # Digits and keyboard walks
    '12341234', '123123123', '1111', '11111', '111222', '121314',
    '131313', '123654789', '147258', '159357', '1234554321', '12344321',
    '123456789a', '1234567a', '12345a', '12345q', '123456q', '1qaz',
    '2wsx', 'qaz123', 'zaq1zaq1', 'zaq1xsw2', '!qaz2wsx', '1q2w3e4r5t6y',
    'qwertyui', 'qweasd', 'qweasdzxc', 'asdzxc', 'asdqwe', 'zxcasd',
    'asdasd', 'qwerasdf', 'poiuytrewq', 'lkjhgfdsa', 'mnbvcxz', 'ytrewq',
    '0987654321', '9876543210', '87654321', '7654321', '101010', '202020',
    '696969', '777777', '555555', '999999', '222222', '333333', '444444',
    '1212', '2000', '2001', '2002', '2010', '2020', '2021', '2022',
    '1987', '1988', '1989', '1990', '1991', '1992', '1993', '1994',
    '1995', '1996', '1997', '1998', '1999', '1980', '1985', '1986',
    '123456789q', 'q123456', 'qwe123qwe', 'abc123abc', 'abcdefg',
    'abcdefgh', 'abcdefghi', 'zzzzzz', 'xxxxxx', 'qqqqqq', 'aaaa',
    'aaaaaaaa', '00000000', '1234abcd', 'password1234', 'passw0rd1',
    'p@ssw0rd1', 'p@55w0rd', 'pa55word', 'pa$$word', 'qwerty!',
    'welcome!', 'admin!', 'admin@123', 'admin2020', 'root123',
)

COMMON_PASSWORD_FILTER = BloomFilter.build(
    COMMON_PASSWORDS,
    size=BLOOM_SIZE,
    hash_count=BLOOM_HASH_COUNT
)
