TURKISH_TRANSLATIONS: dict[str, str] = {
    "abandon": "Terk etmek",
    "abate": "Azalmak, dinmek",
    "ability": "Yetenek",
    "abstract": "Soyut",
    "abundant": "Bol",
    "academic": "Akademik",
    "accelerate": "Hızlandırmak",
    "accept": "Kabul etmek",
    "access": "Erişim",
    "accommodate": "Barındırmak, uyum sağlamak",
    "accomplish": "Başarmak",
    "accurate": "Doğru, kesin",
    "acknowledge": "Kabul etmek, onaylamak",
    "acquire": "Edinmek, kazanmak",
    "advocate": "Savunmak, desteklemek",
    "allocate": "Ayırmak, tahsis etmek",
    "analyze": "Analiz etmek, incelemek",
    "approach": "Yaklaşmak, yaklaşım",
    "appropriate": "Uygun, yerinde",
    "assess": "Değerlendirmek, ölçmek",
    "assume": "Varsaymak, üstlenmek",
    "authority": "Yetki, otorite",
    "benefit": "Yarar, fayda",
    "benevolent": "İyiliksever, hayırsever",
    "candid": "Açık sözlü, samimi",
    "category": "Kategori, sınıf",
    "circumstance": "Durum, şart",
    "commit": "Taahhüt etmek, kararlılık göstermek",
    "communicate": "İletişim kurmak",
    "concept": "Kavram, fikir",
    "conclude": "Sonuçlandırmak, bitirmek",
    "conduct": "Yürütmek, davranmak",
    "consequence": "Sonuç, netice",
    "consist": "Oluşmak, ibaret olmak",
    "constant": "Sabit, sürekli",
    "constitute": "Oluşturmak, teşkil etmek",
    "construct": "İnşa etmek, kurmak",
    "context": "Bağlam, durum",
    "contribute": "Katkıda bulunmak",
    "demonstrate": "Göstermek, kanıtlamak",
    "derive": "Türetmek, elde etmek",
    "diligent": "Çalışkan, gayretli",
    "distribute": "Dağıtmak, paylaştırmak",
    "economy": "Ekonomi, tasarruf",
    "environment": "Çevre, ortam",
    "ephemeral": "Geçici, kısa ömürlü",
    "establish": "Kurmak, tesis etmek",
    "estimate": "Tahmin etmek",
    "evident": "Açık, belli",
    "expand": "Genişletmek, büyümek",
    "factor": "Faktör, etken",
    "frugal": "Tutumlu, mütevazı",
    "function": "İşlev, fonksiyon",
    "gregarious": "Sosyal, sürü halinde",
    "hypothesis": "Hipotez, varsayım",
    "identify": "Tanımlamak, belirlemek",
    "illustrate": "Örneklemek, göstermek",
    "implement": "Uygulamak, yerine getirmek",
    "imply": "Ima etmek, anlamına gelmek",
    "indicate": "Göstermek, belirtmek",
    "inevitable": "Kaçınılmaz",
    "jubilant": "Sevinçli, coşkulu",
}


def translate(term: str) -> str:
    # TODO: replace the static table with a translation API client once one is configured in settings
    return TURKISH_TRANSLATIONS.get(term.lower()) or f'[Türkçe: "{term}"]'
